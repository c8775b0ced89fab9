"""
共通ヘルパー関数
"""
import uuid
from datetime import datetime, timezone


def generate_id() -> str:
    """新しいUUID4文字列を生成する"""
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    """
    現在時刻をISO-8601形式（UTC、ミリ秒、末尾Z）で返す

    例: 2024-05-01T12:34:56.789Z
    """
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
