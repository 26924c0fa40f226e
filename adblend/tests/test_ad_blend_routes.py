"""
HTTP tests for the ad blend endpoints and the health check.
"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from adblend import config
from adblend.api.app import app
from adblend.api.ad_blend.encoding import to_data_uri
from adblend.exceptions import ConfigurationError

from conftest import GENERATED_PNG, MODEL_JPEG, PRODUCT_PNG, text_only_response


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def patched_client(mock_genai_client):
    with patch("adblend.api.ad_blend.service.get_client", return_value=mock_genai_client):
        yield mock_genai_client


@pytest.fixture
def form_data():
    return {
        "action": "walking past",
        "style": "cinematic",
        "background": "serene beach at sunset",
        "productName": "straw hat",
    }


@pytest.fixture
def form_files():
    return {
        "modelImage": ("model.jpg", MODEL_JPEG, "image/jpeg"),
        "productImage": ("product.png", PRODUCT_PNG, "image/png"),
    }


@pytest.fixture
def json_payload():
    return {
        "modelImage": to_data_uri(MODEL_JPEG, "image/jpeg"),
        "productImage": to_data_uri(PRODUCT_PNG, "image/png"),
        "action": "walking past",
        "style": "cinematic",
        "background": "serene beach at sunset",
        "productName": "straw hat",
    }


class TestGenerateForm:

    def test_success(self, client, patched_client, form_data, form_files):
        response = client.post("/ad-blend/generate", data=form_data, files=form_files)

        assert response.status_code == 200
        assert response.json() == {"generatedImage": to_data_uri(GENERATED_PNG, "image/png")}
        patched_client.aio.models.generate_content.assert_awaited_once()
        contents = patched_client.aio.models.generate_content.call_args.kwargs["contents"]
        assert contents[0].startswith("A cinematic photograph of a fashionable model walking past the straw hat.")

    def test_missing_file_is_reported_as_invalid_form(self, client, patched_client, form_data, form_files):
        del form_files["productImage"]

        response = client.post("/ad-blend/generate", data=form_data, files=form_files)

        assert response.status_code == 200
        assert response.json() == {"error": "Invalid form data. Please ensure all fields are filled correctly."}
        patched_client.aio.models.generate_content.assert_not_called()

    def test_unsupported_type_is_reported_as_invalid_form(self, client, patched_client, form_data, form_files):
        form_files["modelImage"] = ("model.txt", b"plain text", "text/plain")

        response = client.post("/ad-blend/generate", data=form_data, files=form_files)

        assert response.json() == {"error": "Invalid form data. Please ensure all fields are filled correctly."}

    def test_no_image_returned(self, client, patched_client, form_data, form_files):
        patched_client.aio.models.generate_content.return_value = text_only_response()

        response = client.post("/ad-blend/generate", data=form_data, files=form_files)

        assert response.status_code == 200
        assert response.json() == {"error": "Image generation failed. Please try again."}

    def test_transport_failure(self, client, patched_client, form_data, form_files):
        patched_client.aio.models.generate_content.side_effect = ConnectionError("network unreachable")

        response = client.post("/ad-blend/generate", data=form_data, files=form_files)

        assert response.status_code == 200
        assert "network unreachable" in response.json()["error"]
        assert "generatedImage" not in response.json()

    def test_text_in_file_field_is_reported_as_invalid_form(self, client, patched_client, form_data, form_files):
        del form_files["modelImage"]
        form_data["modelImage"] = "oops"

        response = client.post("/ad-blend/generate", data=form_data, files=form_files)

        assert response.status_code == 200
        assert response.json() == {"error": "Invalid form data. Please ensure all fields are filled correctly."}
        patched_client.aio.models.generate_content.assert_not_called()

    def test_empty_file_is_reported_as_invalid_form(self, client, patched_client, form_data, form_files):
        form_files["productImage"] = ("product.png", b"", "image/png")

        response = client.post("/ad-blend/generate", data=form_data, files=form_files)

        assert response.status_code == 200
        assert response.json() == {"error": "Invalid form data. Please ensure all fields are filled correctly."}
        patched_client.aio.models.generate_content.assert_not_called()


class TestGenerateBlendedImageJson:

    def test_success(self, client, patched_client, json_payload):
        response = client.post("/ad-blend/generate-blended-image", json=json_payload)

        assert response.status_code == 200
        assert response.json() == {"generatedImage": to_data_uri(GENERATED_PNG, "image/png")}

    def test_schema_violation(self, client, patched_client, json_payload):
        json_payload["style"] = ""

        response = client.post("/ad-blend/generate-blended-image", json=json_payload)

        assert response.status_code == 422
        patched_client.aio.models.generate_content.assert_not_called()

    def test_rejects_non_image_data_uri(self, client, patched_client, json_payload):
        json_payload["productImage"] = to_data_uri(b"%PDF-1.7", "application/pdf")

        response = client.post("/ad-blend/generate-blended-image", json=json_payload)

        assert response.status_code == 422

    def test_undecodable_payload(self, client, patched_client, json_payload):
        json_payload["modelImage"] = "data:image/png;base64,aGVsbG8"

        response = client.post("/ad-blend/generate-blended-image", json=json_payload)

        assert response.status_code == 400
        assert "Invalid base64 payload" in response.json()["error"]
        patched_client.aio.models.generate_content.assert_not_called()

    def test_missing_api_key(self, client, json_payload):
        with patch(
            "adblend.api.ad_blend.service.get_client",
            side_effect=ConfigurationError("Google API key not configured"),
        ):
            response = client.post("/ad-blend/generate-blended-image", json=json_payload)

        assert response.status_code == 503
        assert response.json() == {"error": "Google API key not configured"}

    def test_no_image_returned(self, client, patched_client, json_payload):
        patched_client.aio.models.generate_content.return_value = text_only_response()

        response = client.post("/ad-blend/generate-blended-image", json=json_payload)

        assert response.status_code == 502
        assert response.json() == {"error": "Image generation failed. Please try again."}

    def test_transport_failure(self, client, patched_client, json_payload):
        patched_client.aio.models.generate_content.side_effect = RuntimeError("safety block")

        response = client.post("/ad-blend/generate-blended-image", json=json_payload)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate image: safety block"}


def test_options(client):
    response = client.get("/ad-blend/options")

    assert response.status_code == 200
    body = response.json()
    assert {"value": "holding delicately", "label": "Holding"} in body["actions"]
    assert [item["value"] for item in body["styles"]] == [
        "full-body shot", "medium shot", "close-up", "cinematic", "dramatic",
    ]
    assert len(body["backgrounds"]) == 6


def test_health_reports_missing_api_key(client):
    with patch.object(config, "GOOGLE_API_KEY", None):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["checks"]["gemini"]["status"] == "degraded"


def test_health_ok(client):
    with patch.object(config, "GOOGLE_API_KEY", "test_key"):
        response = client.get("/health")

    assert response.json()["status"] == "ok"
    assert "X-Request-Id" in response.headers
