"""Google Service Account credentials for the Sheets API.

Service accounts authenticate server-to-server without user interaction. A
spreadsheet must be shared with the service account email before it can be
read.

Example:
    >>> auth = GoogleServiceAccount(
    ...     key_path="service_account_key.json",
    ...     scopes=["sheets_readonly"],
    ... )
    >>> client = SpreadsheetClient(spreadsheet_id, credentials=auth.credentials)
"""

import json
import logging
from pathlib import Path

from google.oauth2 import service_account

from sheet_ranges.config import get_service_account_path
from sheet_ranges.google.exceptions import CredentialsNotFoundError, GoogleAuthError

logger = logging.getLogger(__name__)


SCOPES = {
    "sheets": "https://www.googleapis.com/auth/spreadsheets",
    "sheets_readonly": "https://www.googleapis.com/auth/spreadsheets.readonly",
}


def resolve_scopes(scopes: list[str]) -> list[str]:
    """Resolve scope names to full URLs."""
    resolved = []
    for scope in scopes:
        if scope.startswith("https://"):
            resolved.append(scope)
        elif scope in SCOPES:
            resolved.append(SCOPES[scope])
        else:
            raise ValueError(
                f"Unknown scope: {scope}. Use full URL or one of: {list(SCOPES.keys())}"
            )
    return resolved


class GoogleServiceAccount:
    """Read-only loader for a service account key.

    The key file is read once; no tokens are written or cached locally.
    """

    def __init__(
        self,
        key_path: str | Path | None = None,
        scopes: list[str] | None = None,
    ):
        """Initialize service account authentication.

        Args:
            key_path: Path to service account JSON key file. Defaults to
                SHEET_RANGES_SERVICE_ACCOUNT or google/service_account_key.json.
            scopes: List of scope names (e.g., ["sheets"]) or full URLs.
                   If None, defaults to ["sheets_readonly"].

        Raises:
            CredentialsNotFoundError: If key file not found.
            GoogleAuthError: If key file is invalid.
        """
        self.key_path = Path(key_path) if key_path else get_service_account_path()

        if not self.key_path.exists():
            raise CredentialsNotFoundError(str(self.key_path))

        self.scopes = resolve_scopes(scopes or ["sheets_readonly"])

        try:
            with open(self.key_path) as f:
                key_data = json.load(f)
        except json.JSONDecodeError as e:
            raise GoogleAuthError(f"Invalid JSON in key file: {e}") from e

        if key_data.get("type") != "service_account":
            raise GoogleAuthError(
                f"Invalid key file: expected type 'service_account', "
                f"got '{key_data.get('type')}'"
            )

        self.client_email = key_data.get("client_email", "")
        self.project_id = key_data.get("project_id", "")

        try:
            self._credentials = service_account.Credentials.from_service_account_info(
                key_data,
                scopes=self.scopes,
            )
        except ValueError as e:
            raise GoogleAuthError(f"Invalid service account key: {e}") from e

        logger.info(f"Service account initialized: {self.client_email}")
        logger.info(f"Scopes: {self.scopes}")

    @property
    def credentials(self):
        """Get the service account credentials."""
        return self._credentials

    @property
    def email(self) -> str:
        """Get the service account email address.

        Share spreadsheets with this email to grant access.
        """
        return self.client_email

    def get_info(self) -> dict:
        return {
            "type": "service_account",
            "email": self.client_email,
            "project_id": self.project_id,
            "scopes": self.scopes,
            "key_path": str(self.key_path),
        }
