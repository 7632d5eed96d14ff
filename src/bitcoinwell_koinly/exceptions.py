"""
Custom exceptions for the converter.
"""
from typing import Any


class ConverterError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MalformedTimestamp(ConverterError):
    """Raised when an order date does not match YYYY-MM-DD HH:mm:ss."""
    pass


class ParseFailure(ConverterError):
    """Raised when an input file is not well-formed tabular data."""
    pass


class ConfigurationError(ConverterError):
    """Raised when configuration is invalid."""
    pass
