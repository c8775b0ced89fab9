import logging

from mediflow.schemas import (
    HumanName, ContactPoint, Patient, BundleEntry, BundleMeta, FhirBundle,
    GenerateFhirResponse
)
from mediflow.utils import generate_id, utc_now_iso

logger = logging.getLogger(__name__)


class FhirService:
    """FHIRバンドル生成を管理するサービスクラス"""

    def build_patient(self) -> Patient:
        """Patientリソースを作成する"""
        return Patient(
            id=generate_id(),
            name=[HumanName(given=["John"], family="Doe")],
            birthDate="1990-01-15",
            telecom=[ContactPoint(system="email", value="john.doe@example.com")],
        )

    def generate_bundle(self, patient_data=None) -> GenerateFhirResponse:
        """患者データからtransaction Bundleを生成する（患者データは参照しない）"""
        bundle = FhirBundle(
            id=generate_id(),
            meta=BundleMeta(lastUpdated=utc_now_iso()),
            entry=[BundleEntry(resource=self.build_patient())],
        )
        logger.info(f"FHIR bundle generated: bundle_id={bundle.id}")

        return GenerateFhirResponse(
            fhirBundle=bundle,
            compliant=True,
            message="FHIR R4 compliant bundle generated",
        )
