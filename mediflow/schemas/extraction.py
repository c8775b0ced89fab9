from pydantic import BaseModel
from typing import Any, List


class ExtractFormRequest(BaseModel):
    """フォーム抽出リクエスト"""
    image: Any = None
    formType: Any = None


class ExtractedFields(BaseModel):
    """フォームから抽出された患者情報"""
    patientName: str
    dateOfBirth: str
    medications: List[str]
    allergies: List[str]
    medicalConditions: List[str]


class ExtractedForm(BaseModel):
    """フォーム抽出結果"""
    formId: str
    formType: str
    extractedAt: str
    fields: ExtractedFields
    confidence: float
    ocrEngine: str
    processingTime: str


class ExtractFormResponse(BaseModel):
    """フォーム抽出APIのレスポンス"""
    success: bool = True
    data: ExtractedForm
    message: str
