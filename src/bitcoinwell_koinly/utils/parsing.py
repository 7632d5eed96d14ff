"""Parsing utilities for exchange export files."""

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

from bitcoinwell_koinly.exceptions import MalformedTimestamp, ParseFailure
from bitcoinwell_koinly.koinly import format_line
from bitcoinwell_koinly.models import PLACEHOLDER

# Bitcoin Well order dates are local time at a fixed UTC-07:00, no DST
SOURCE_UTC_OFFSET = timedelta(hours=-7)
SOURCE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
KOINLY_DATE_FORMAT = "%Y-%m-%d %H:%M UTC"

_SOURCE_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")


def to_utc(date_str: str) -> str:
    """
    Convert a Bitcoin Well order date to a Koinly UTC timestamp.

    "2024-01-15 10:00:00" (UTC-07:00) becomes "2024-01-15 17:00 UTC".
    Seconds are truncated.

    Args:
        date_str: Local timestamp in YYYY-MM-DD HH:mm:ss format

    Returns:
        Timestamp formatted as YYYY-MM-DD HH:mm UTC

    Raises:
        MalformedTimestamp: If the value is not a valid timestamp in that format
    """
    value = date_str.strip()

    # strptime alone accepts single-digit fields
    if not _SOURCE_DATE_RE.fullmatch(value):
        raise MalformedTimestamp(
            f"Malformed order date: {date_str!r}", details={"value": date_str}
        )

    try:
        local = datetime.strptime(value, SOURCE_DATE_FORMAT)
        # Late on 9999-12-31 the UTC value overflows datetime.max
        utc = local.replace(tzinfo=timezone(SOURCE_UTC_OFFSET)).astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise MalformedTimestamp(
            f"Malformed order date: {date_str!r} ({e})", details={"value": date_str}
        ) from e

    return utc.strftime(KOINLY_DATE_FORMAT)


def is_placeholder(value: str | None) -> bool:
    """Return True if value is empty or the "-" placeholder."""
    return not value or value == PLACEHOLDER


def clean_optional(value: str | None) -> str:
    """Return value, or an empty string when it is absent or a placeholder."""
    if is_placeholder(value):
        return ""
    return value  # type: ignore[return-value]


def format_number(value: float) -> str:
    """
    Render a spreadsheet number the way it reads in a CSV export.

    Whole numbers lose their ".0" and small values avoid scientific
    notation (0.00001, not 1e-05).
    """
    if value.is_integer():
        return str(int(value))
    # repr gives the shortest string that round-trips the float
    return format(Decimal(repr(value)), "f")


def read_file(filepath: Path) -> str:
    """
    Read file content, handling both text and Excel files.

    Args:
        filepath: Path to the file

    Returns:
        File content as string (Excel files converted to CSV format)

    Raises:
        ParseFailure: If file cannot be read
    """
    if not filepath.exists():
        raise ParseFailure(f"File not found: {filepath}", details={"path": str(filepath)})

    # OLE2 magic bytes (used by .xls)
    with open(filepath, "rb") as f:
        is_xls = f.read(4) == b"\xd0\xcf\x11\xe0"

    if is_xls or filepath.suffix.lower() == ".xls":
        return _read_excel(filepath)
    return _read_text(filepath)


def _read_text(filepath: Path) -> str:
    """Read text file with encoding detection."""
    encodings = ["utf-8-sig", "utf-8", "latin-1", "cp1252"]

    for encoding in encodings:
        try:
            with open(filepath, encoding=encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError:
            continue

    raise ParseFailure(
        f"Could not decode file {filepath} with any known encoding",
        details={"path": str(filepath)},
    )


def _read_excel(filepath: Path) -> str:
    """Read Excel file and convert to CSV string."""
    try:
        import xlrd  # type: ignore[import-untyped]
    except ImportError as err:
        raise ParseFailure(
            "xlrd is required to read Excel files. "
            "Install with: pip install 'bitcoinwell-koinly[excel]'"
        ) from err

    try:
        wb = xlrd.open_workbook(str(filepath))
        sheet = wb.sheet_by_index(0)

        lines = []
        for row in range(sheet.nrows):
            row_data = []
            for col in range(sheet.ncols):
                cell = sheet.cell(row, col)
                if cell.ctype == xlrd.XL_CELL_DATE:
                    dt = xlrd.xldate_as_datetime(cell.value, wb.datemode)
                    row_data.append(dt.strftime(SOURCE_DATE_FORMAT))
                elif cell.ctype == xlrd.XL_CELL_NUMBER:
                    row_data.append(format_number(cell.value))
                else:
                    row_data.append(str(cell.value))
            lines.append(format_line(row_data))

        return "\n".join(lines)

    except xlrd.XLRDError as e:
        raise ParseFailure(
            f"Could not read Excel file {filepath}: {e}", details={"path": str(filepath)}
        ) from e
