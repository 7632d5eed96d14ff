"""Koinly universal CSV generation."""

import csv
import io
from collections.abc import Callable, Iterable
from operator import attrgetter

from bitcoinwell_koinly.models import TargetRecord

DEFAULT_OUTPUT_FILENAME = "koinly_export.csv"
OUTPUT_MIME_TYPE = "text/csv; charset=utf-8"

# Header name -> accessor, in Koinly column order
KOINLY_COLUMNS: tuple[tuple[str, Callable[[TargetRecord], str]], ...] = (
    ("Date", attrgetter("date")),
    ("Sent Amount", attrgetter("sent_amount")),
    ("Sent Currency", attrgetter("sent_currency")),
    ("Received Amount", attrgetter("received_amount")),
    ("Received Currency", attrgetter("received_currency")),
    ("Fee Amount", attrgetter("fee_amount")),
    ("Fee Currency", attrgetter("fee_currency")),
    ("Net Worth Amount", attrgetter("net_worth_amount")),
    ("Net Worth Currency", attrgetter("net_worth_currency")),
    ("Label", attrgetter("label")),
    ("Description", attrgetter("description")),
    ("TxHash", attrgetter("tx_hash")),
)

KOINLY_HEADERS = [header for header, _ in KOINLY_COLUMNS]

# A CRLF terminator makes QUOTE_MINIMAL quote both \r and \n inside fields
_WRITER_TERMINATOR = "\r\n"


def format_line(values: Iterable[str]) -> str:
    """
    Render values as one CSV line without a line terminator.

    Values containing a comma, double quote or line break are wrapped in
    double quotes with internal quotes doubled. Everything else is raw.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator=_WRITER_TERMINATOR)
    writer.writerow(values)
    return buffer.getvalue().removesuffix(_WRITER_TERMINATOR)


def format_row(record: TargetRecord) -> str:
    """Render one Koinly row as a CSV line."""
    return format_line(getter(record) for _, getter in KOINLY_COLUMNS)


def generate_koinly_csv(records: Iterable[TargetRecord]) -> str:
    """
    Generate Koinly CSV text from target records.

    Args:
        records: Koinly rows in output order

    Returns:
        Header line plus one line per record, joined by "\\n" with no
        trailing newline
    """
    lines = [format_line(KOINLY_HEADERS)]
    lines.extend(format_row(record) for record in records)
    return "\n".join(lines)
