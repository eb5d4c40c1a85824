"""Tests for media uploads"""

import hashlib
from unittest.mock import patch

import cloudinary.exceptions
import cloudinary.utils
import pytest
from fastapi.testclient import TestClient

from ffportal.config import Config
from ffportal.services.upload import extract_public_id

IMAGE_URL = (
    "https://res.cloudinary.com/demo-cloud/image/upload/v1712345678/programs/krisflyer.png"
)


class TestPublicId:
    """Test public id parsing of delivery URLs"""

    def test_extract_public_id(self):
        assert extract_public_id(IMAGE_URL) == "programs/krisflyer"
        assert extract_public_id(IMAGE_URL.replace(".png", ".WEBP")) == (
            "programs/krisflyer"
        )
        assert extract_public_id("https://example.com/image.png") is None
        assert extract_public_id(IMAGE_URL.replace(".png", ".svg")) is None


class TestUploadEndpoints:
    """Test API endpoints"""

    def test_upload_signature(self, test_app: TestClient, test_config: Config):
        response = test_app.post("/upload/signature", json={"folder": "cards"})
        assert response.status_code == 200
        data = response.json()
        assert data["folder"] == "cards"
        assert data["public_id"].startswith("cards/")
        assert data["api_key"] == test_config.cloudinary_api_key
        assert data["cloud_name"] == "demo-cloud"
        assert data["upload_url"] == (
            "https://api.cloudinary.com/v1_1/demo-cloud/image/upload"
        )
        # sha1 of the sorted parameters followed by the api secret
        to_sign = (
            f"folder=cards&public_id={data['public_id']}"
            f"&timestamp={data['timestamp']}{test_config.cloudinary_api_secret}"
        )
        assert data["signature"] == hashlib.sha1(to_sign.encode()).hexdigest()

    def test_upload_signature_default_folder(self, test_app: TestClient):
        response = test_app.post("/upload/signature")
        assert response.status_code == 200
        assert response.json()["folder"] == "programs"

    def test_upload_signature_bad_folder(self, test_app: TestClient):
        response = test_app.post("/upload/signature", json={"folder": "../etc"})
        assert response.status_code == 400

    def test_upload_signature_requires_token(self, anonymous_client: TestClient):
        response = anonymous_client.post("/upload/signature")
        assert response.status_code == 401

    def test_delete_image_by_url(self, test_app: TestClient, test_config: Config):
        with patch(
            "cloudinary.uploader.destroy", return_value={"result": "ok"}
        ) as destroy:
            response = test_app.request("DELETE", "/upload/image", json={"url": IMAGE_URL})
        assert response.status_code == 200
        data = response.json()
        assert data["public_id"] == "programs/krisflyer"
        assert data["message"] == "Image deleted successfully"

        assert destroy.call_args.args == ("programs/krisflyer",)
        options = destroy.call_args.kwargs
        assert options["cloud_name"] == "demo-cloud"
        assert options["api_key"] == test_config.cloudinary_api_key
        assert options["api_secret"] == test_config.cloudinary_api_secret
        assert options["timeout"] == test_config.cloudinary_timeout

    def test_delete_image_already_gone(self, test_app: TestClient):
        with patch(
            "cloudinary.uploader.destroy", return_value={"result": "not found"}
        ):
            response = test_app.request(
                "DELETE", "/upload/image", json={"public_id": "programs/gone"}
            )
        assert response.status_code == 200
        assert response.json()["public_id"] == "programs/gone"

    def test_delete_image_without_identifier(self, test_app: TestClient):
        with patch("cloudinary.uploader.destroy") as destroy:
            response = test_app.request("DELETE", "/upload/image", json={})
        assert response.status_code == 400
        assert response.json()["message"] == "Either url or public_id is required"
        destroy.assert_not_called()

    def test_delete_image_unparseable_url(self, test_app: TestClient):
        with patch("cloudinary.uploader.destroy") as destroy:
            response = test_app.request(
                "DELETE", "/upload/image", json={"url": "https://example.com/a"}
            )
        assert response.status_code == 400
        assert response.json()["error_code"] == 6002
        destroy.assert_not_called()

    @pytest.mark.parametrize(
        "side_effect, return_value",
        [
            (cloudinary.exceptions.AuthorizationRequired("Invalid Signature"), None),
            (cloudinary.exceptions.GeneralError("Socket Error: timed out"), None),
            (None, {"result": "error"}),
        ],
    )
    def test_delete_image_media_host_failure(
        self, test_app: TestClient, side_effect, return_value
    ):
        with patch(
            "cloudinary.uploader.destroy",
            side_effect=side_effect,
            return_value=return_value,
        ):
            response = test_app.request(
                "DELETE", "/upload/image", json={"public_id": "programs/a"}
            )
        assert response.status_code == 500
        assert response.json()["error_code"] == 6502

    def test_image_info(self, test_app: TestClient):
        response = test_app.get("/upload/image-info/programs/krisflyer")
        assert response.status_code == 200
        data = response.json()
        assert data["public_id"] == "programs/krisflyer"
        assert data["exists"] is True
        assert data["url"].startswith("https://res.cloudinary.com/demo-cloud/image/upload/")
        assert "f_auto" in data["url"]
        assert "q_auto" in data["url"]
        assert data["url"].endswith("/programs/krisflyer")

    def test_image_info_matches_sdk(self, test_app: TestClient):
        expected, _ = cloudinary.utils.cloudinary_url(
            "programs/krisflyer",
            quality="auto",
            fetch_format="auto",
            secure=True,
            cloud_name="demo-cloud",
        )
        response = test_app.get("/upload/image-info/programs/krisflyer")
        assert response.json()["url"] == expected


class TestUploadsNotConfigured:
    """Uploads are refused until media host credentials are set"""

    @pytest.fixture(scope="class")
    def test_config(self, test_config: Config):
        test_config.cloudinary_api_secret = ""
        return test_config

    def test_upload_signature(self, test_app: TestClient):
        response = test_app.post("/upload/signature")
        assert response.status_code == 500
        assert response.json()["error_code"] == 6501

    def test_delete_image(self, test_app: TestClient):
        with patch("cloudinary.uploader.destroy") as destroy:
            response = test_app.request(
                "DELETE", "/upload/image", json={"public_id": "programs/a"}
            )
        assert response.status_code == 500
        destroy.assert_not_called()
