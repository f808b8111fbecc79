"""Google Sheets API client for reading ranges.

Usage:
    from sheet_ranges.google import GoogleServiceAccount
    from sheet_ranges.sheets import SpreadsheetClient

    auth = GoogleServiceAccount(scopes=["sheets_readonly"])
    client = SpreadsheetClient("1AbC...", credentials=auth.credentials)
    results = client.get("Sheet1!A1:C10")

Service Account Setup:
    1. Create a service account key in Google Cloud Console
    2. Save it as google/service_account_key.json (or set SHEET_RANGES_SERVICE_ACCOUNT)
    3. Share the spreadsheet with the service account email
"""

from __future__ import annotations

from sheet_ranges.sheets.client import SpreadsheetClient, ValueRange

__all__ = ["SpreadsheetClient", "ValueRange"]
