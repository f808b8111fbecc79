"""CLI for sheet-ranges - A1 notation helpers.

Usage:
    sheet-ranges column <number>                 # 27 -> AA
    sheet-ranges letters <letters>               # AA -> 27
    sheet-ranges parse <a1>                      # Show anchors and geometry as JSON
    sheet-ranges get <spreadsheet_id> <a1>...    # Read ranges with a service account
    sheet-ranges status                          # Show configuration status
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any


def _anchor_dict(anchor) -> dict[str, Any]:
    return {"row": anchor.row, "column": anchor.column, "a1": anchor.a1}


def _geometry(sheet_range, name: str) -> int | None:
    from sheet_ranges.coordinates import PreconditionError

    try:
        return getattr(sheet_range, name)
    except PreconditionError:
        return None


def describe_range(sheet_range) -> dict[str, Any]:
    """Summarize a SheetRange as a JSON-ready dict; missing axes give None."""
    return {
        "sheet_title": sheet_range.sheet_title,
        "first_anchor": _anchor_dict(sheet_range.first_anchor),
        "second_anchor": _anchor_dict(sheet_range.second_anchor),
        "a1": sheet_range.a1,
        "minimum_row": _geometry(sheet_range, "minimum_row"),
        "maximum_row": _geometry(sheet_range, "maximum_row"),
        "minimum_column": _geometry(sheet_range, "minimum_column"),
        "maximum_column": _geometry(sheet_range, "maximum_column"),
        "row_count": _geometry(sheet_range, "row_count"),
        "column_count": _geometry(sheet_range, "column_count"),
    }


def cmd_column(number: int) -> int:
    """Print the letters for a column number."""
    from sheet_ranges.coordinates import column_lettering

    try:
        print(column_lettering(number))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_letters(letters: str) -> int:
    """Print the column number for column letters."""
    from sheet_ranges.coordinates import ParseError, column_from_lettering

    try:
        print(column_from_lettering(letters))
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_parse(a1: str) -> int:
    """Parse a range and print its structure."""
    from sheet_ranges.coordinates import ParseError, SheetRange

    try:
        sheet_range = SheetRange.from_a1(a1)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(describe_range(sheet_range), indent=2))
    return 0


def cmd_get(
    spreadsheet_id: str,
    ranges: list[str],
    key_path: str | None = None,
    render: str | None = None,
) -> int:
    """Read ranges from a spreadsheet using a service account."""
    from sheet_ranges.google import GoogleAuthError, GoogleServiceAccount
    from sheet_ranges.sheets import SpreadsheetClient

    try:
        auth = GoogleServiceAccount(key_path=key_path, scopes=["sheets_readonly"])
        client = SpreadsheetClient(spreadsheet_id, credentials=auth.credentials)
        results = client.get(*ranges, value_render_option=render)
    except (GoogleAuthError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = [{"range": result.range.a1, "values": result.values} for result in results]
    print(json.dumps(output, indent=2, default=str))
    return 0


def cmd_status() -> int:
    """Show configuration status."""
    from sheet_ranges.config import get_config_status

    status = get_config_status()

    print("=" * 60)
    print("SHEET-RANGES STATUS")
    print("=" * 60)
    print()
    print(f"Repository: {status['repo_root']}")
    print(f"  .env:                   {'[x]' if status['env_file'] else '[ ]'}")
    print(f"  service_account_key:    {'[x]' if status['service_account']['exists'] else '[ ]'}")
    print(f"    {status['service_account']['path']}")
    print(f"  value render option:    {status['value_render_option']}")
    print()

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sheet-ranges",
        description="A1 notation helpers for Google Sheets ranges",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # column command
    column_parser = subparsers.add_parser("column", help="Column number to letters")
    column_parser.add_argument("number", type=int, help="1-based column number")

    # letters command
    letters_parser = subparsers.add_parser("letters", help="Column letters to number")
    letters_parser.add_argument("letters", help="Column letters (e.g., AA)")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse an A1 range")
    parse_parser.add_argument("a1", help="Range in A1 notation (e.g., Sheet1!B2:D10)")

    # get command
    get_parser = subparsers.add_parser("get", help="Read ranges from a spreadsheet")
    get_parser.add_argument("spreadsheet_id", help="Google Sheets spreadsheet ID")
    get_parser.add_argument("ranges", nargs="+", help="Ranges in A1 notation")
    get_parser.add_argument("--key", dest="key_path", help="Service account key file")
    get_parser.add_argument(
        "--render",
        choices=["FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA"],
        help="Value render option (default: from configuration)",
    )

    # status command
    subparsers.add_parser("status", help="Show configuration status")

    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "column":
        return cmd_column(args.number)

    if args.command == "letters":
        return cmd_letters(args.letters)

    if args.command == "parse":
        return cmd_parse(args.a1)

    if args.command == "get":
        return cmd_get(args.spreadsheet_id, args.ranges, args.key_path, args.render)

    if args.command == "status":
        return cmd_status()

    return 0


if __name__ == "__main__":
    sys.exit(main())
