"""Tests for the sheet-ranges CLI."""

import json
from unittest.mock import patch

from sheet_ranges.cli import main
from sheet_ranges.coordinates import SheetRange
from sheet_ranges.sheets import ValueRange


class TestCodecCommands:
    """Test column and letters commands."""

    def test_column(self, capsys):
        """Should print letters for a number."""
        assert main(["column", "27"]) == 0
        assert capsys.readouterr().out == "AA\n"

    def test_column_invalid(self, capsys):
        """Should fail for non-positive numbers."""
        assert main(["column", "0"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_letters(self, capsys):
        """Should print the number for letters."""
        assert main(["letters", "zz"]) == 0
        assert capsys.readouterr().out == "702\n"

    def test_letters_invalid(self, capsys):
        """Should fail for non-letters."""
        assert main(["letters", "A1"]) == 1
        assert "Invalid A1 notation" in capsys.readouterr().err


class TestParseCommand:
    """Test the parse command."""

    def test_parse(self, capsys):
        """Should print anchors and geometry."""
        assert main(["parse", "'My Sheet'!B2:D10"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["sheet_title"] == "My Sheet"
        assert output["first_anchor"] == {"row": 2, "column": 2, "a1": "B2"}
        assert output["a1"] == "My Sheet!B2:D10"
        assert output["row_count"] == 8
        assert output["column_count"] == 2

    def test_parse_open_axis(self, capsys):
        """Should report missing geometry as null."""
        assert main(["parse", "Sheet1!A:C"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["minimum_row"] is None
        assert output["maximum_column"] == 3

    def test_parse_invalid(self, capsys):
        """Should fail for malformed ranges."""
        assert main(["parse", "B2:D10"]) == 1
        assert "missing sheet title" in capsys.readouterr().err


class TestGetCommand:
    """Test the get command."""

    def test_get(self, capsys):
        """Should print values for each echoed range."""
        with (
            patch("sheet_ranges.google.GoogleServiceAccount") as account,
            patch("sheet_ranges.sheets.SpreadsheetClient") as client_class,
        ):
            client_class.return_value.get.return_value = [
                ValueRange(SheetRange.from_a1("Sheet1!A1:B1"), [["a", "b"]])
            ]
            assert main(["get", "sheet-id", "Sheet1!A1:B1", "--render", "FORMULA"]) == 0

        account.assert_called_once_with(key_path=None, scopes=["sheets_readonly"])
        client_class.return_value.get.assert_called_once_with(
            "Sheet1!A1:B1", value_render_option="FORMULA"
        )
        output = json.loads(capsys.readouterr().out)
        assert output == [{"range": "Sheet1!A1:B1", "values": [["a", "b"]]}]

    def test_get_without_key(self, capsys, tmp_path):
        """Should report a missing key file."""
        assert main(["get", "sheet-id", "Sheet1!A1", "--key", str(tmp_path / "nope.json")]) == 1
        assert "Credentials file not found" in capsys.readouterr().err

    def test_get_invalid_render_option_from_environment(self, capsys, monkeypatch):
        """Should report a bad configured render option instead of crashing."""
        monkeypatch.setenv("SHEET_RANGES_VALUE_RENDER_OPTION", "PRETTY")
        with (
            patch("sheet_ranges.google.GoogleServiceAccount"),
            patch("sheet_ranges.sheets.client.build"),
        ):
            assert main(["get", "sheet-id", "Sheet1!A1"]) == 1
        assert "Unknown value render option" in capsys.readouterr().err


class TestMisc:
    """Test status and help."""

    def test_status(self, capsys):
        """Should print configuration status."""
        assert main(["status"]) == 0
        assert "SHEET-RANGES STATUS" in capsys.readouterr().out

    def test_no_command(self, capsys):
        """Should print help."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out
