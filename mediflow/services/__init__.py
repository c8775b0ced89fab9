"""
Services package
"""

# Import all services to make them available
from . import extraction_service
from . import medication_service
from . import fhir_service

__all__ = [
    'extraction_service',
    'medication_service',
    'fhir_service'
]
