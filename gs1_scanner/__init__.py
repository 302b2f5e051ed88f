"""
GS1 Application Identifier Barcode Scanner

Decodes FNC1-prefixed GS1 element strings (e.g. "]C1" GS1-128 payloads)
into typed fields, reporting malformed input as typed errors inside a
Result instead of raising.

Based on GS1 General Specifications.
"""

from .core import (
    AiCatalogue,
    ErrorCode,
    DecodeError,
    NotGs1Barcode,
    AiNotFound,
    ValueTooShort,
    SeparatorNotFound,
    AiDefinition,
    DecodedField,
    DecodeResult,
    resolve,
    decode_field,
    insert_decimal_point,
    GS1Scanner,
)
from .config import ScannerOptions, DEFAULT_FNC1, DEFAULT_GROUP_SEPARATOR
from .catalogue_loader import load_catalogue, catalogue_from_json
from .json_formatter import format_decode_result, decode_to_dict, decode_to_json
from .result import (
    Result,
    Success,
    Failure,
    IllegalStateError,
    success,
    failure,
    sequence,
)

__version__ = "1.0.0"
__all__ = [
    "AiCatalogue",
    "ErrorCode",
    "DecodeError",
    "NotGs1Barcode",
    "AiNotFound",
    "ValueTooShort",
    "SeparatorNotFound",
    "AiDefinition",
    "DecodedField",
    "DecodeResult",
    "resolve",
    "decode_field",
    "insert_decimal_point",
    "GS1Scanner",
    "ScannerOptions",
    "DEFAULT_FNC1",
    "DEFAULT_GROUP_SEPARATOR",
    "load_catalogue",
    "catalogue_from_json",
    "format_decode_result",
    "decode_to_dict",
    "decode_to_json",
    "Result",
    "Success",
    "Failure",
    "IllegalStateError",
    "success",
    "failure",
    "sequence",
]
