from pydantic import BaseModel
from typing import List


class HealthResponse(BaseModel):
    """ヘルスチェックのレスポンス"""
    status: str
    timestamp: str
    version: str


class StatusResponse(BaseModel):
    """サービス情報のレスポンス"""
    service: str
    status: str
    version: str
    endpoints: List[str]
