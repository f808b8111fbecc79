"""Google Sheets API client that speaks in SheetRange objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from sheet_ranges.config import get_value_render_option
from sheet_ranges.coordinates import SheetRange
from sheet_ranges.google.exceptions import AuthorizationRequired, SpreadsheetAPIError

logger = logging.getLogger(__name__)


@dataclass
class ValueRange:
    """Values read from one range.

    ``values`` is rows of columns. Trailing empty rows and cells may be
    missing, so rows can be shorter than the range.
    """

    range: SheetRange
    values: list[list[Any]] = field(default_factory=list)

    def cell(self, row: int, column: int) -> Any:
        """Get a value by 0-based offset from the range origin, or None if omitted."""
        if 0 <= row < len(self.values) and 0 <= column < len(self.values[row]):
            return self.values[row][column]
        return None


class SpreadsheetClient:
    """Read ranges from one spreadsheet.

    Usage:
        auth = GoogleServiceAccount(scopes=["sheets_readonly"])
        client = SpreadsheetClient("1AbC...", credentials=auth.credentials)

        for result in client.get("Sheet1!A1:C10", SheetRange.from_a1("'Q2 Data'!B2")):
            print(result.range.a1, result.values)

    Note:
        The API echoes each range back in normalized form, so
        ``result.range`` may differ from the requested range
        (e.g. ``Sheet1!A1:C10`` becomes ``Sheet1!A1:C3`` when only three
        rows hold data).
    """

    def __init__(
        self,
        spreadsheet_id: str,
        credentials: Any = None,
        service: Any = None,
    ) -> None:
        """Initialize Sheets client.

        Args:
            spreadsheet_id: Google Sheets spreadsheet ID.
            credentials: Authorized google-auth credentials.
            service: Prebuilt Sheets API service (skips building one).

        Raises:
            AuthorizationRequired: If neither credentials nor service is given.
        """
        if credentials is None and service is None:
            raise AuthorizationRequired(
                "Sheets API requires credentials. "
                "Pass credentials from GoogleServiceAccount or a prebuilt service."
            )
        self._id = spreadsheet_id
        self._credentials = credentials
        self._service = service

    @property
    def id(self) -> str:
        return self._id

    def _get_service(self) -> Any:
        """Get or create Sheets API service."""
        if self._service is None:
            logger.info(f"Building Sheets API service for spreadsheet {self._id}")
            self._service = build("sheets", "v4", credentials=self._credentials)
        return self._service

    def get(
        self,
        *ranges: SheetRange | str,
        value_render_option: str | None = None,
    ) -> list[ValueRange]:
        """Read several ranges in one request.

        Args:
            *ranges: SheetRange objects or A1 strings (e.g., "Sheet1!A1:C10").
            value_render_option: How to render values ("FORMATTED_VALUE",
                "UNFORMATTED_VALUE", "FORMULA"). Defaults to configuration.

        Returns:
            One ValueRange per requested range, in response order.

        Raises:
            ParseError: If a range string or an echoed range is not valid A1 notation.
            SpreadsheetAPIError: If the API request fails.
        """
        sheet_ranges = [
            r if isinstance(r, SheetRange) else SheetRange.from_a1(r) for r in ranges
        ]
        if not sheet_ranges:
            return []

        service = self._get_service()
        requested = [r.a1 for r in sheet_ranges]
        logger.info(f"Fetching {len(requested)} range(s) from {self._id}: {requested}")
        try:
            response = (
                service.spreadsheets()
                .values()
                .batchGet(
                    spreadsheetId=self._id,
                    ranges=requested,
                    valueRenderOption=value_render_option or get_value_render_option(),
                )
                .execute()
            )
        except HttpError as e:
            logger.error(f"batchGet failed for {self._id}: {e}")
            raise SpreadsheetAPIError(
                f"Failed to read ranges {requested}: {e}", status_code=e.resp.status
            ) from e

        return [
            ValueRange(
                range=SheetRange.from_a1(value_range["range"]),
                values=value_range.get("values", []),
            )
            for value_range in response.get("valueRanges", [])
        ]

    def get_information(self) -> dict[str, Any]:
        """Get raw spreadsheet metadata (title, sheets, grid properties).

        Raises:
            SpreadsheetAPIError: If the API request fails.
        """
        service = self._get_service()
        try:
            return service.spreadsheets().get(spreadsheetId=self._id).execute()
        except HttpError as e:
            logger.error(f"Failed to get spreadsheet {self._id}: {e}")
            raise SpreadsheetAPIError(
                f"Failed to get spreadsheet {self._id}: {e}", status_code=e.resp.status
            ) from e
