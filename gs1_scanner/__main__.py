"""
CLI interface for GS1 Scanner.

Usage:
    python -m gs1_scanner "<barcode text>" [options]

Options:
    --fnc1 PREFIX         Symbology prefix (default "]C1")
    --gs SEPARATOR        Group separator text (default "<GS>")
    --catalogue PATH      JSON AI catalogue (default: packaged gs1.json)
    --json                Output as JSON
    -v, --verbose         Debug logging

Defaults can also be set with GS1_SCANNER_FNC1, GS1_SCANNER_GS and
GS1_SCANNER_CATALOGUE.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import ScannerOptions
from .core.errors import DecodeError
from .core.models import DecodeResult
from .core.scanner import GS1Scanner
from .json_formatter import format_decode_result
from .result import Failure, Result


EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_CATALOGUE_ERROR = 2


def format_result(result: Result[DecodeResult, DecodeError]) -> str:
    """Format decode result for display."""
    if isinstance(result, Failure):
        error = result.error
        return '\n'.join([
            "GS1 Decode Failed",
            "-" * 40,
            f"  [{error.code.value}] {error.message}",
        ])

    decoded = result.value
    lines = [
        "=" * 60,
        "GS1 Decode Result",
        "=" * 60,
        f"Barcode: {decoded.barcode!r}",
        "",
        "Fields:",
        "-" * 40,
    ]
    for item in decoded.fields:
        lines.append(f"  AI({item.code}): {item.ai.title or item.ai.short_name}")
        lines.append(f"    Value: {item.value!r}")
    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_scanner',
        description='Decode FNC1-prefixed GS1 barcodes'
    )

    parser.add_argument(
        'barcode',
        help='Barcode data to decode, FNC1 prefix included'
    )

    parser.add_argument(
        '--fnc1',
        default=None,
        help='Symbology prefix marking a GS1 barcode'
    )

    parser.add_argument(
        '--gs',
        default=None,
        help='Text used as group separator'
    )

    parser.add_argument(
        '--catalogue',
        default=None,
        help='Path to a JSON AI catalogue (defaults to package data file)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Environment first, flags override
    env = ScannerOptions.from_env()
    options = ScannerOptions(
        fnc1=args.fnc1 or env.fnc1,
        group_separator=args.gs or env.group_separator,
        catalogue_path=Path(args.catalogue) if args.catalogue else env.catalogue_path,
    )

    scanner_result = GS1Scanner.from_options(options)
    if isinstance(scanner_result, Failure):
        print(f"Unable to build scanner: {scanner_result.error}", file=sys.stderr)
        return EXIT_CATALOGUE_ERROR

    result = scanner_result.value.decode(args.barcode)

    if args.json:
        print(json.dumps(format_decode_result(result), indent=2, ensure_ascii=False))
    else:
        print(format_result(result))

    return EXIT_OK if result.is_success else EXIT_DECODE_ERROR


if __name__ == '__main__':
    sys.exit(main())
