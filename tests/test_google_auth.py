"""Tests for Google service account credentials."""

import json
from unittest.mock import patch

import pytest

from sheet_ranges.google import (
    SCOPES,
    CredentialsNotFoundError,
    GoogleAuthError,
    GoogleServiceAccount,
)
from sheet_ranges.google.service_account import resolve_scopes

FROM_SERVICE_ACCOUNT_INFO = (
    "sheet_ranges.google.service_account.service_account.Credentials.from_service_account_info"
)


class TestScopes:
    """Test scope resolution."""

    def test_available_scopes(self):
        """Should define the Sheets scopes."""
        assert "sheets" in SCOPES
        assert "sheets_readonly" in SCOPES

    def test_scope_names_resolve(self):
        """Should resolve scope names to URLs."""
        assert resolve_scopes(["sheets"]) == ["https://www.googleapis.com/auth/spreadsheets"]

    def test_full_url_scopes_accepted(self):
        """Should pass full scope URLs through."""
        url = "https://www.googleapis.com/auth/drive"
        assert resolve_scopes([url]) == [url]

    def test_unknown_scope_raises(self):
        """Should raise error for unknown scope names."""
        with pytest.raises(ValueError, match="Unknown scope"):
            resolve_scopes(["unknown_scope"])


class TestGoogleServiceAccount:
    """Test loading service account keys."""

    @pytest.fixture
    def key_file(self, tmp_path):
        """Create a mock service account key file."""
        key = {
            "type": "service_account",
            "project_id": "test-project",
            "client_email": "reader@test-project.iam.gserviceaccount.com",
            "private_key": "not-a-real-key",
            "token_uri": "https://oauth2.googleapis.com/token",
        }
        key_path = tmp_path / "service_account_key.json"
        with open(key_path, "w") as f:
            json.dump(key, f)
        return key_path

    def test_key_not_found(self, tmp_path):
        """Should raise error when key file is missing."""
        with pytest.raises(CredentialsNotFoundError):
            GoogleServiceAccount(key_path=tmp_path / "missing.json")

    def test_default_path_from_environment(self, tmp_path, monkeypatch):
        """Should read the key path from SHEET_RANGES_SERVICE_ACCOUNT."""
        missing = tmp_path / "env_key.json"
        monkeypatch.setenv("SHEET_RANGES_SERVICE_ACCOUNT", str(missing))
        with pytest.raises(CredentialsNotFoundError) as excinfo:
            GoogleServiceAccount()
        assert excinfo.value.path == str(missing)

    def test_invalid_json(self, tmp_path):
        """Should reject key files that are not JSON."""
        key_path = tmp_path / "key.json"
        key_path.write_text("{not json")
        with pytest.raises(GoogleAuthError, match="Invalid JSON"):
            GoogleServiceAccount(key_path=key_path)

    def test_wrong_key_type(self, tmp_path):
        """Should reject OAuth client files passed as keys."""
        key_path = tmp_path / "credentials.json"
        key_path.write_text(json.dumps({"installed": {"client_id": "x"}}))
        with pytest.raises(GoogleAuthError, match="expected type 'service_account'"):
            GoogleServiceAccount(key_path=key_path)

    def test_unreadable_private_key(self, key_file):
        """Should wrap key parsing failures."""
        error = ValueError("No key could be detected.")
        with (
            patch(FROM_SERVICE_ACCOUNT_INFO, side_effect=error),
            pytest.raises(GoogleAuthError, match="Invalid service account key"),
        ):
            GoogleServiceAccount(key_path=key_file)

    def test_loads_key(self, key_file):
        """Should build credentials with resolved scopes."""
        with patch(FROM_SERVICE_ACCOUNT_INFO) as from_info:
            auth = GoogleServiceAccount(key_path=key_file, scopes=["sheets"])

        assert auth.credentials is from_info.return_value
        assert auth.email == "reader@test-project.iam.gserviceaccount.com"
        assert from_info.call_args.kwargs["scopes"] == [SCOPES["sheets"]]
        info = auth.get_info()
        assert info["project_id"] == "test-project"
        assert info["key_path"] == str(key_file)
