"""
リクエストボディの読み取り
"""
import json
import logging
import re
from typing import Any, AsyncGenerator, Dict, List

from fastapi import HTTPException, Request
from starlette.datastructures import FormData
from starlette.formparsers import FormParser

from mediflow.config import settings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# "a[b][0]" の "[b]" "[0]" 部分
KEY_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")

# これを超える添字はリストではなく辞書のキーとして扱う
ARRAY_INDEX_LIMIT = 20


def split_form_key(key: str) -> List[str]:
    """
    フォームのキーを階層ごとに分割する

    例: "patientData[name]" -> ["patientData", "name"]
        "medications[]"     -> ["medications", ""]
    """
    bracket = key.find("[")
    if bracket <= 0 or not key.endswith("]"):
        return [key]

    suffix = key[bracket:]
    segments = KEY_SEGMENT_RE.findall(suffix)
    if "".join(f"[{segment}]" for segment in segments) != suffix:
        return [key]
    return [key[:bracket]] + segments


def _next_index(container: Dict[str, Any]) -> str:
    return str(len(container))


def _assign(container: Dict[str, Any], segments: List[str], value: Any) -> None:
    head, rest = segments[0], segments[1:]
    if head == "":
        head = _next_index(container)

    if rest:
        child = container.get(head)
        if not isinstance(child, dict):
            child = container[head] = {}
        _assign(child, rest, value)
        return

    if head not in container:
        container[head] = value
        return

    existing = container[head]
    if isinstance(existing, list):
        existing.append(value)
    elif isinstance(existing, dict):
        existing[_next_index(existing)] = value
    else:
        container[head] = [existing, value]


def _finalize(node: Any) -> Any:
    """添字だけをキーに持つ辞書をリストに変換する"""
    if isinstance(node, list):
        return [_finalize(item) for item in node]
    if not isinstance(node, dict):
        return node

    node = {key: _finalize(value) for key, value in node.items()}
    if node and all(key.isdigit() and int(key) <= ARRAY_INDEX_LIMIT for key in node):
        return [node[key] for key in sorted(node, key=int)]
    return node


def form_to_dict(form: FormData) -> Dict[str, Any]:
    """
    フォームデータを辞書に変換する

    - 同じキーが複数回現れた場合はリストにまとめる
    - "a[]" や "a[0]" はリスト、"a[b]" は入れ子の辞書として扱う
    """
    data: Dict[str, Any] = {}
    for key, value in form.multi_items():
        _assign(data, split_form_key(key), value)
    return {key: _finalize(value) for key, value in data.items()}


async def read_limited_body(request: Request) -> bytes:
    """
    上限を超えた時点で打ち切りながらリクエストボディを読み取る

    Raises:
        HTTPException: ボディが上限を超える場合は413
    """
    size = 0
    chunks = []
    async for chunk in request.stream():
        size += len(chunk)
        if size > settings.MAX_BODY_SIZE:
            logger.warning(f"Request body too large: more than {settings.MAX_BODY_SIZE} bytes")
            raise HTTPException(status_code=413, detail="Request body too large")
        chunks.append(chunk)
    return b"".join(chunks)


async def _replay(body: bytes) -> AsyncGenerator[bytes, None]:
    yield body
    yield b""


async def read_request_body(request: Request) -> Dict[str, Any]:
    """
    リクエストボディを辞書として読み取る

    JSONとURLエンコードされたフォームに対応する。
    それ以外のContent-Type、空のボディ、配列のJSONは空の辞書として扱う。

    Raises:
        HTTPException: ボディが上限を超える場合は413、JSONが不正な場合は400
    """
    body = await read_limited_body(request)
    if not body:
        return {}

    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()

    if media_type == FORM_CONTENT_TYPE:
        form = await FormParser(request.headers, _replay(body)).parse()
        return form_to_dict(form)

    if media_type != JSON_CONTENT_TYPE:
        logger.info(f"Unsupported Content-Type ignored: {content_type}")
        return {}

    try:
        data = json.loads(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid JSON body: {str(e)}")

    # オブジェクトと配列以外のトップレベル値は受け付けない
    if isinstance(data, list):
        return {}
    if not isinstance(data, dict):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid JSON body: top-level value must be an object or array, got {type(data).__name__}")
    return data
