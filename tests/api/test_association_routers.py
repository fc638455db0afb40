"""
Tests for the API router endpoints.
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from bindx.entities.Association import Association, ExtensionLookup
from bindx.exceptions import (
    ApplicationIndexError,
    InvalidInputError,
    ScanTimeoutError,
    TypeResolutionError,
)
from bindx.main import app

client = TestClient(app)


class TestLookupAPI:
    """Test cases for the single extension endpoint."""

    def test_lookup_success(self):
        """A resolved extension returns its handler."""
        with patch("bindx.api.routers.get_lookup_extension_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = ExtensionLookup(
                "pdf",
                "com.adobe.pdf",
                Association("pdf", "com.apple.Preview", "/Applications/Preview.app"),
            )

            response = client.get("/associations/.pdf")

            assert response.status_code == 200
            data = response.json()
            assert data["extension"] == "pdf"
            assert data["content_type"] == "com.adobe.pdf"
            assert data["association"] == {
                "extension": "pdf",
                "handler_identifier": "com.apple.Preview",
                "handler_path": "/Applications/Preview.app",
                "status": "resolved",
            }
            mock_uc.return_value.execute.assert_called_once_with(".pdf")

    def test_lookup_no_handler(self):
        """A known type without handler returns null handler fields."""
        with patch("bindx.api.routers.get_lookup_extension_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = ExtensionLookup(
                "md", "net.daringfireball.markdown", Association("md")
            )

            response = client.get("/associations/md")

            assert response.status_code == 200
            association = response.json()["association"]
            assert association["handler_identifier"] is None
            assert association["handler_path"] is None
            assert association["status"] == "none"

    def test_lookup_unknown_type(self):
        with patch("bindx.api.routers.get_lookup_extension_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = ExtensionLookup("xyz123")

            response = client.get("/associations/xyz123")

            assert response.status_code == 404
            assert response.json()["detail"] == (
                "Could not determine UTI for extension '.xyz123'"
            )

    def test_lookup_invalid_input(self):
        with patch("bindx.api.routers.get_lookup_extension_uc") as mock_uc:
            mock_uc.return_value.execute.side_effect = InvalidInputError("Invalid extension: '..'")

            response = client.get("/associations/..ext")

            assert response.status_code == 400

    def test_lookup_registry_error(self):
        with patch("bindx.api.routers.get_lookup_extension_uc") as mock_uc:
            mock_uc.return_value.execute.side_effect = TypeResolutionError("registry down")

            response = client.get("/associations/pdf")

            assert response.status_code == 500
            assert response.json()["detail"] == "registry down"


class TestListAPI:
    """Test cases for the enumeration endpoint."""

    def test_list_success(self):
        with patch("bindx.api.routers.get_list_associations_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = [
                Association("pdf", "com.apple.Preview", "/Applications/Preview.app"),
                Association("psd", "com.adobe.Photoshop"),
            ]

            response = client.get("/associations?app=Preview")

            assert response.status_code == 200
            data = response.json()["associations"]
            assert [a["extension"] for a in data] == ["pdf", "psd"]
            assert data[1]["status"] == "unresolved"
            mock_uc.return_value.execute.assert_called_once_with("Preview")

    def test_list_without_filter(self):
        with patch("bindx.api.routers.get_list_associations_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = []

            response = client.get("/associations")

            assert response.status_code == 200
            assert response.json() == {"associations": []}
            mock_uc.return_value.execute.assert_called_once_with(None)

    def test_list_timeout(self):
        with patch("bindx.api.routers.get_list_associations_uc") as mock_uc:
            mock_uc.return_value.execute.side_effect = ScanTimeoutError(30)

            response = client.get("/associations")

            assert response.status_code == 504

    def test_list_index_error(self):
        with patch("bindx.api.routers.get_list_associations_uc") as mock_uc:
            mock_uc.return_value.execute.side_effect = ApplicationIndexError("no index")

            response = client.get("/associations")

            assert response.status_code == 500
            assert response.json()["detail"] == "no index"


def test_health():
    assert client.get("/health").json() == {"status": "ok"}
