"""
Routers package
"""

# Import all routers to make them available
from . import health
from . import extraction
from . import medication
from . import fhir

__all__ = [
    'health',
    'extraction',
    'medication',
    'fhir'
]
