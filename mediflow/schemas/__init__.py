"""
Pydantic schemas for API request/response validation
"""
from .health import HealthResponse, StatusResponse
from .extraction import ExtractFormRequest, ExtractedFields, ExtractedForm, ExtractFormResponse
from .medication import ValidateMedicationsRequest, ValidationResult, ValidateMedicationsResponse
from .fhir import (
    GenerateFhirRequest, HumanName, ContactPoint, Patient, BundleEntry, BundleMeta, FhirBundle,
    GenerateFhirResponse
)
from .common import ErrorResponse

__all__ = [
    # Health
    "HealthResponse",
    "StatusResponse",
    # Extraction
    "ExtractFormRequest",
    "ExtractedFields",
    "ExtractedForm",
    "ExtractFormResponse",
    # Medication
    "ValidateMedicationsRequest",
    "ValidationResult",
    "ValidateMedicationsResponse",
    # FHIR
    "GenerateFhirRequest",
    "HumanName",
    "ContactPoint",
    "Patient",
    "BundleEntry",
    "BundleMeta",
    "FhirBundle",
    "GenerateFhirResponse",
    # Common
    "ErrorResponse",
]
