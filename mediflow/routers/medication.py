from fastapi import APIRouter, HTTPException, Request
import logging

from mediflow.schemas import ValidateMedicationsRequest, ValidateMedicationsResponse
from mediflow.services.medication_service import MedicationService
from mediflow.utils import read_request_body

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Medication"])

medication_service = MedicationService()


@router.post("/validate-medications", response_model=ValidateMedicationsResponse)
async def validate_medications(request: Request):
    """薬剤リストを検証する"""
    try:
        payload = ValidateMedicationsRequest(**await read_request_body(request))
        return medication_service.validate_medications(payload.medications)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error validating medications: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
