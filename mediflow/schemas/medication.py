from pydantic import BaseModel, Field
from typing import Any, List


class ValidateMedicationsRequest(BaseModel):
    """薬剤検証リクエスト"""
    medications: Any = None


class ValidationResult(BaseModel):
    """薬剤ごとの検証結果"""
    medication: Any
    valid: bool = True
    interactions: List[Any] = Field(default_factory=list)
    riskScore: float
    warnings: List[str] = Field(default_factory=list)


class ValidateMedicationsResponse(BaseModel):
    """薬剤検証APIのレスポンス"""
    success: bool = True
    validationResults: List[ValidationResult]
    overallRiskScore: float
    safeForProcessing: bool
