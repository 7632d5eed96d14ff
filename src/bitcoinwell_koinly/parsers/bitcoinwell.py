"""Bitcoin Well export parser."""

import csv
import io
from pathlib import Path
from typing import ClassVar

from bitcoinwell_koinly.exceptions import ParseFailure
from bitcoinwell_koinly.logger import setup_logger
from bitcoinwell_koinly.parsers.base import ExchangeParser, ParserRegistry

logger = setup_logger(__name__)


@ParserRegistry.register
class BitcoinWellParser(ExchangeParser):
    """Parser for Bitcoin Well transaction history CSV exports."""

    exchange_name: ClassVar[str] = "Bitcoin Well"
    file_patterns: ClassVar[list[str]] = ["Order Type", "Order Date", "Crypto Code"]

    @classmethod
    def can_parse(cls, content: str, filepath: Path | None = None) -> bool:
        """Check if content is a Bitcoin Well export."""
        return all(pattern in content for pattern in cls.file_patterns)

    @staticmethod
    def _is_header(row: list[str]) -> bool:
        cells = {cell.strip() for cell in row}
        return "Order Type" in cells and "Transaction ID" in cells

    def parse(self, content: str) -> list[dict[str, str]]:
        """Parse Bitcoin Well rows keyed by column name."""
        content = content.lstrip("\ufeff")
        reader = csv.reader(io.StringIO(content, newline=""))

        header: list[str] | None = None
        rows: list[dict[str, str]] = []

        try:
            for row in reader:
                # Skip empty lines
                if not any(cell.strip() for cell in row):
                    continue

                if header is None:
                    # Anything above the header (title banners etc.) is ignored
                    if self._is_header(row):
                        header = [cell.strip() for cell in row]
                    continue

                if len(row) != len(header):
                    raise ParseFailure(
                        f"Line {reader.line_num}: expected {len(header)} fields, "
                        f"found {len(row)}",
                        details={"line": reader.line_num, "fields": len(row)},
                    )

                rows.append(dict(zip(header, row)))
        except csv.Error as e:
            raise ParseFailure(
                f"Line {reader.line_num}: {e}", details={"line": reader.line_num}
            ) from e

        if header is None:
            raise ParseFailure("No Bitcoin Well header row found")

        logger.debug(f"Parsed {len(rows)} Bitcoin Well rows")
        return rows
