from fastapi import APIRouter, HTTPException, Request
import logging

from mediflow.schemas import GenerateFhirRequest, GenerateFhirResponse
from mediflow.services.fhir_service import FhirService
from mediflow.utils import read_request_body

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["FHIR"])

fhir_service = FhirService()


@router.post("/generate-fhir", response_model=GenerateFhirResponse)
async def generate_fhir(request: Request):
    """FHIRバンドルを生成する"""
    try:
        payload = GenerateFhirRequest(**await read_request_body(request))
        return fhir_service.generate_bundle(payload.patientData)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating FHIR bundle: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
