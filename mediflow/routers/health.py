from fastapi import APIRouter

from mediflow.config import settings
from mediflow.schemas import HealthResponse, StatusResponse
from mediflow.utils import utc_now_iso

router = APIRouter(tags=["Health"])

# /api/status で公開するエンドポイント一覧
API_ENDPOINTS = [
    "/health",
    "/api/extract-form",
    "/api/validate-medications",
    "/api/generate-fhir",
    "/api/status",
]


@router.get("/health", response_model=HealthResponse)
def health_check():
    """ヘルスチェックエンドポイント"""
    return HealthResponse(
        status="✅ Backend running",
        timestamp=utc_now_iso(),
        version=settings.SERVICE_VERSION,
    )


@router.get("/api/status", response_model=StatusResponse)
def get_status():
    """サービス情報と公開エンドポイントを返す"""
    return StatusResponse(
        service=settings.SERVICE_NAME,
        status="operational",
        version=settings.SERVICE_VERSION,
        endpoints=list(API_ENDPOINTS),
    )
