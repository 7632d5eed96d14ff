"""bitcoinwell-koinly - Convert Bitcoin Well exports to Koinly CSV."""

from bitcoinwell_koinly.converter import KoinlyConverter
from bitcoinwell_koinly.exceptions import ConverterError, MalformedTimestamp, ParseFailure
from bitcoinwell_koinly.koinly import generate_koinly_csv
from bitcoinwell_koinly.mapping import convert_row, filter_swaps
from bitcoinwell_koinly.models import SourceRecord, TargetRecord

__version__ = "0.1.0"
__all__ = [
    "ConverterError",
    "KoinlyConverter",
    "MalformedTimestamp",
    "ParseFailure",
    "SourceRecord",
    "TargetRecord",
    "convert_row",
    "filter_swaps",
    "generate_koinly_csv",
]
