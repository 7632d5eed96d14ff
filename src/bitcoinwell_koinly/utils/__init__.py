"""Utility functions for bitcoinwell-koinly."""

from bitcoinwell_koinly.utils.parsing import (
    clean_optional,
    format_number,
    is_placeholder,
    read_file,
    to_utc,
)

__all__ = ["to_utc", "is_placeholder", "clean_optional", "format_number", "read_file"]
