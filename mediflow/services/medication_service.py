import logging
from typing import Any

from mediflow.schemas import ValidationResult, ValidateMedicationsResponse

logger = logging.getLogger(__name__)

MEDICATION_RISK_SCORE = 0.05
OVERALL_RISK_SCORE = 0.03


class MedicationService:
    """薬剤検証を管理するサービスクラス

    相互作用データベースは持たず、すべての薬剤を有効と判定する。
    """

    def validate_medications(self, medications: Any) -> ValidateMedicationsResponse:
        """
        薬剤リストを検証する

        Args:
            medications: 薬剤名のリスト

        Raises:
            TypeError: medications がリストでない場合（未指定を含む）
        """
        if not isinstance(medications, list):
            raise TypeError(
                f"medications must be a list, got {type(medications).__name__}")

        results = [
            ValidationResult(
                medication=medication,
                riskScore=MEDICATION_RISK_SCORE,
            )
            for medication in medications
        ]
        logger.info(f"Validated {len(results)} medications")

        return ValidateMedicationsResponse(
            validationResults=results,
            overallRiskScore=OVERALL_RISK_SCORE,
            safeForProcessing=True,
        )
