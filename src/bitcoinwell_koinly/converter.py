"""Main converter class that orchestrates parsing, mapping and CSV output."""

from collections.abc import Mapping, Sequence
from pathlib import Path

from bitcoinwell_koinly.exceptions import ParseFailure
from bitcoinwell_koinly.koinly import generate_koinly_csv
from bitcoinwell_koinly.logger import setup_logger
from bitcoinwell_koinly.mapping import convert_rows
from bitcoinwell_koinly.parsers.base import ParserRegistry
from bitcoinwell_koinly.utils import read_file

logger = setup_logger(__name__)


class KoinlyConverter:
    """
    Convert a Bitcoin Well export into a Koinly universal CSV.

    Usage:
        converter = KoinlyConverter()
        csv_text = converter.convert_file(Path("bitcoinwell.csv"))
        converter.write_csv(csv_text, Path("koinly_export.csv"))
    """

    def __init__(self) -> None:
        self.rows_read = 0
        self.rows_written = 0

    @property
    def swaps_skipped(self) -> int:
        """Rows dropped from the last conversion (swap orders)."""
        return self.rows_read - self.rows_written

    def convert_rows(self, rows: Sequence[Mapping[str, str | None]]) -> str:
        """
        Convert already-parsed rows to Koinly CSV text.

        Args:
            rows: Header-keyed rows from a Bitcoin Well export

        Returns:
            Koinly CSV text

        Raises:
            MalformedTimestamp: If any row has an unparseable order date
        """
        self.rows_read = 0
        self.rows_written = 0

        records = convert_rows(rows)

        self.rows_read = len(rows)
        self.rows_written = len(records)
        logger.info(
            f"Converted {self.rows_written} rows "
            f"({self.rows_read} read, {self.swaps_skipped} swaps skipped)"
        )
        return generate_koinly_csv(records)

    def convert_content(self, content: str, filepath: Path | None = None) -> str:
        """
        Convert raw export text to Koinly CSV text.

        Args:
            content: File content as string
            filepath: Optional path used for parser detection

        Returns:
            Koinly CSV text

        Raises:
            ParseFailure: If no parser matches or the content is malformed
            MalformedTimestamp: If any row has an unparseable order date
        """
        parser = ParserRegistry.get_parser(content, filepath)
        if parser is None:
            raise ParseFailure(
                "No parser found for this file format",
                details={"path": str(filepath) if filepath else None},
            )

        logger.debug(f"Using {parser.exchange_name} parser")
        return self.convert_rows(parser.parse(content))

    def convert_file(self, filepath: Path) -> str:
        """
        Read and convert a single export file.

        Args:
            filepath: Path to the file

        Returns:
            Koinly CSV text
        """
        return self.convert_content(read_file(filepath), filepath)

    @staticmethod
    def write_csv(csv_text: str, output_path: Path) -> None:
        """
        Write Koinly CSV text to a file.

        Args:
            csv_text: Output of a convert_* call
            output_path: Output file path
        """
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            f.write(csv_text)
