#!/usr/bin/env python3
"""Command-line interface for bitcoinwell-koinly."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from bitcoinwell_koinly.config import (
    config_exists,
    create_default_config,
    find_config_file,
    get_log_level,
    get_output_filename,
    load_config,
    save_json_config,
)
from bitcoinwell_koinly.converter import KoinlyConverter
from bitcoinwell_koinly.exceptions import ConverterError
from bitcoinwell_koinly.logger import set_level
from bitcoinwell_koinly.parsers import ParserRegistry


def format_error(error: ConverterError) -> str:
    """Render an error with its row/line location if known."""
    location = []
    if "row_number" in error.details:
        location.append(f"row {error.details['row_number']}")
    if error.details.get("transaction_id"):
        location.append(f"transaction {error.details['transaction_id']}")
    if location:
        return f"{error.message} ({', '.join(location)})"
    return error.message


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a Bitcoin Well transaction export to a Koinly universal CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bitcoinwell-koinly ~/Downloads/bitcoinwell.csv
  bitcoinwell-koinly bitcoinwell.csv -o koinly.csv
  bitcoinwell-koinly bitcoinwell.csv --stdout
  bitcoinwell-koinly --list-parsers
  bitcoinwell-koinly --init-config

Swap orders are skipped. Order dates are converted from UTC-07:00 to UTC.
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Bitcoin Well CSV export",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output CSV file (default: koinly_export.csv)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the CSV instead of writing a file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.json file",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default config.json to the user config directory",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration",
    )
    parser.add_argument(
        "--list-parsers",
        action="store_true",
        help="List available export parsers",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    if args.init_config:
        if config_exists():
            print(f"Config already exists: {find_config_file()}", file=sys.stderr)
            return 1
        path = save_json_config(create_default_config())
        print(f"Wrote default config to {path}", file=sys.stderr)
        return 0

    try:
        config: dict[str, Any] | None = load_config(args.config)
        set_level(get_log_level(config, args.verbose))
        output_name = get_output_filename(config, args.output)
    except ConverterError as e:
        print(f"Error: {format_error(e)}", file=sys.stderr)
        return 1

    if args.show_config:
        if config:
            print(json.dumps(config, indent=2))
        else:
            print("No configuration found. Using defaults.")
        return 0

    # List parsers and exit
    if args.list_parsers:
        print("Available parsers:")
        for parser_cls in ParserRegistry.get_all_parsers():
            print(f"  - {parser_cls.exchange_name}: {parser_cls.__name__}")
            if parser_cls.file_patterns:
                print(f"    Patterns: {', '.join(parser_cls.file_patterns)}")
        return 0

    if not args.input:
        parser.print_help()
        return 1

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: {args.input} not found", file=sys.stderr)
        return 1

    converter = KoinlyConverter()
    try:
        csv_text = converter.convert_file(input_path)
    except ConverterError as e:
        print(f"Error: {format_error(e)}", file=sys.stderr)
        return 1

    print(f"Read {converter.rows_read} rows", file=sys.stderr)
    if converter.swaps_skipped > 0:
        print(f"Skipped {converter.swaps_skipped} swap orders", file=sys.stderr)

    if args.stdout:
        sys.stdout.write(csv_text)
        return 0

    output_path = Path(output_name)
    converter.write_csv(csv_text, output_path)
    print(f"Wrote {converter.rows_written} transactions to {output_path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
