"""Exchange parsers package."""

from bitcoinwell_koinly.parsers.base import ExchangeParser, ParserRegistry
from bitcoinwell_koinly.parsers.bitcoinwell import BitcoinWellParser

__all__ = [
    "ExchangeParser",
    "ParserRegistry",
    "BitcoinWellParser",
]
