"""Google service account credentials and API exceptions."""

from sheet_ranges.google.exceptions import (
    AuthorizationRequired,
    CredentialsNotFoundError,
    GoogleAuthError,
    SpreadsheetAPIError,
)
from sheet_ranges.google.service_account import SCOPES, GoogleServiceAccount

__all__ = [
    "GoogleServiceAccount",
    "SCOPES",
    "GoogleAuthError",
    "CredentialsNotFoundError",
    "AuthorizationRequired",
    "SpreadsheetAPIError",
]
