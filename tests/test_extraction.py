from fastapi.testclient import TestClient

from mediflow.main import app
from mediflow.schemas import ExtractFormRequest

client = TestClient(app)


def test_extract_form_returns_static_fields():
    response = client.post(
        "/api/extract-form", json={"image": "data:image/png;base64,AAAA"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Form processed successfully"

    data = body["data"]
    assert data["formType"] == "medical"
    assert data["confidence"] == 0.92
    assert data["ocrEngine"] == "Tesseract 5.0"
    assert data["processingTime"] == "0.8s"
    assert data["fields"]["patientName"] == "John Doe"
    assert data["fields"]["medications"] == ["Aspirin 500mg", "Lisinopril 10mg"]
    assert data["fields"]["allergies"] == ["Penicillin"]
    assert data["extractedAt"].endswith("Z")


def test_extract_form_uses_requested_form_type():
    response = client.post("/api/extract-form", json={"formType": "intake"})
    assert response.json()["data"]["formType"] == "intake"


def test_extract_form_empty_form_type_falls_back_to_medical():
    response = client.post("/api/extract-form", json={"formType": ""})
    assert response.json()["data"]["formType"] == "medical"


def test_extract_form_ids_are_unique():
    ids = {
        client.post("/api/extract-form", json={}).json()["data"]["formId"]
        for _ in range(5)
    }
    assert len(ids) == 5


def test_extract_form_accepts_any_body():
    assert client.post("/api/extract-form").status_code == 200
    assert client.post("/api/extract-form", json=["not", "an", "object"]).status_code == 200
    response = client.post("/api/extract-form", data={"formType": "dental"})
    assert response.status_code == 200
    assert response.json()["data"]["formType"] == "dental"


def test_extract_form_request_defaults():
    payload = ExtractFormRequest()
    assert payload.image is None
    assert payload.formType is None
