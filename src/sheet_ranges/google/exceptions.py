"""Google authentication and API exceptions."""


class GoogleAuthError(Exception):
    """Base exception for Google authentication errors."""

    pass


class CredentialsNotFoundError(GoogleAuthError):
    """Raised when a service account key file is not found."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Credentials file not found at {path}. "
            "Please download a service account key from Google Cloud Console."
        )


class AuthorizationRequired(GoogleAuthError):
    """Raised when an API client is created without any credentials."""

    pass


class SpreadsheetAPIError(GoogleAuthError):
    """Raised when the Sheets API returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
