"""
FHIR R4 リソースの簡易モデル

エンベロープの形だけを表現し、FHIRスキーマの検証は行わない。
"""
from pydantic import BaseModel
from typing import Any, List


class GenerateFhirRequest(BaseModel):
    """FHIR生成リクエスト"""
    patientData: Any = None


class HumanName(BaseModel):
    given: List[str]
    family: str


class ContactPoint(BaseModel):
    system: str
    value: str


class Patient(BaseModel):
    """Patientリソース"""
    resourceType: str = "Patient"
    id: str
    name: List[HumanName]
    birthDate: str
    telecom: List[ContactPoint]


class BundleEntry(BaseModel):
    resource: Patient


class BundleMeta(BaseModel):
    lastUpdated: str


class FhirBundle(BaseModel):
    """transaction型のBundle"""
    resourceType: str = "Bundle"
    type: str = "transaction"
    id: str
    meta: BundleMeta
    entry: List[BundleEntry]


class GenerateFhirResponse(BaseModel):
    """FHIR生成APIのレスポンス"""
    success: bool = True
    fhirBundle: FhirBundle
    compliant: bool
    message: str
