from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """エラーレスポンス"""
    success: bool = False
    error: str
