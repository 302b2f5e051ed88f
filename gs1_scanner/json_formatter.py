"""
JSON Formatter for GS1 Scanner

Turns decode results and decode errors into plain dictionaries / JSON so
they can be printed by the CLI or handed to other systems.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from .core.errors import DecodeError
from .core.models import DecodeResult
from .core.scanner import GS1Scanner
from .result import Result, Success


def format_decode_result(result: Result[DecodeResult, DecodeError]) -> Dict[str, Any]:
    """
    Format a decode result as a dictionary.

    Success:
        {"success": true, "barcode": ..., "fields": [{"ai", "title", "short_name", "value"}]}
    Failure:
        {"success": false, "error": {"code", "message", ...context}}
    """
    if isinstance(result, Success):
        return {'success': True, **result.value.to_dict()}
    return {'success': False, 'error': result.error.to_dict()}


def decode_to_dict(scanner: GS1Scanner, barcode: str) -> Dict[str, Any]:
    """Decode `barcode` and return the formatted dictionary."""
    return format_decode_result(scanner.decode(barcode))


def decode_to_json(scanner: GS1Scanner, barcode: str) -> str:
    """
    Decode `barcode` and return JSON output.

    Example:
        >>> print(decode_to_json(scanner, "]C10112345678901234"))
        {
          "success": true,
          "barcode": "]C10112345678901234",
          "fields": [
            {
              "ai": "01",
              "title": "GTIN",
              "short_name": "GTIN",
              "value": "12345678901234"
            }
          ]
        }
    """
    return json.dumps(decode_to_dict(scanner, barcode), ensure_ascii=False, indent=2)
