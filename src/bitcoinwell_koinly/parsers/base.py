"""Base parser class and registry for exchange export parsers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar


class ExchangeParser(ABC):
    """Abstract base class for exchange export parsers.

    A parser turns raw export text into header-keyed rows; mapping those
    rows onto Koinly is left to the converter.
    """

    # Class attributes to be overridden by subclasses
    exchange_name: ClassVar[str] = "Unknown"
    file_patterns: ClassVar[list[str]] = []  # Patterns to match in file content

    @classmethod
    @abstractmethod
    def can_parse(cls, content: str, filepath: Path | None = None) -> bool:
        """
        Check if this parser can handle the given file content.

        Args:
            content: File content as string
            filepath: Optional path for extension checking

        Returns:
            True if this parser can handle the file
        """
        pass

    @abstractmethod
    def parse(self, content: str) -> list[dict[str, str]]:
        """
        Parse file content into header-keyed rows.

        Args:
            content: File content as string

        Returns:
            One dict per data row, in file order

        Raises:
            ParseFailure: If the content is not well-formed tabular text
        """
        pass


class ParserRegistry:
    """Registry for exchange parsers with automatic detection."""

    _parsers: ClassVar[list[type[ExchangeParser]]] = []

    @classmethod
    def register(cls, parser_class: type[ExchangeParser]) -> type[ExchangeParser]:
        """
        Register a parser class. Can be used as a decorator.

        Example:
            @ParserRegistry.register
            class MyExchangeParser(ExchangeParser):
                ...
        """
        if parser_class not in cls._parsers:
            cls._parsers.append(parser_class)
        return parser_class

    @classmethod
    def get_parser(cls, content: str, filepath: Path | None = None) -> ExchangeParser | None:
        """
        Get appropriate parser for the given content.

        Args:
            content: File content as string
            filepath: Optional filepath for extension detection

        Returns:
            Parser instance if found, None otherwise
        """
        for parser_class in cls._parsers:
            if parser_class.can_parse(content, filepath):
                return parser_class()
        return None

    @classmethod
    def get_all_parsers(cls) -> list[type[ExchangeParser]]:
        """Get all registered parser classes."""
        return cls._parsers.copy()
