from fastapi import APIRouter, HTTPException, Request
import logging

from mediflow.schemas import ExtractFormRequest, ExtractFormResponse
from mediflow.services.extraction_service import ExtractionService
from mediflow.utils import read_request_body

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Extraction"])

extraction_service = ExtractionService()


@router.post("/extract-form", response_model=ExtractFormResponse)
async def extract_form(request: Request):
    """フォーム画像から情報を抽出する"""
    try:
        payload = ExtractFormRequest(**await read_request_body(request))
        return extraction_service.extract_form(
            payload.image, payload.formType)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error extracting form: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
