"""
Core decoding modules for GS1 Scanner.
"""

from .catalogue import AiCatalogue
from .errors import (
    ErrorCode,
    DecodeError,
    NotGs1Barcode,
    AiNotFound,
    ValueTooShort,
    SeparatorNotFound,
)
from .models import AiDefinition, DecodedField, DecodeResult
from .resolver import resolve
from .field_decoder import decode_field, insert_decimal_point
from .scanner import GS1Scanner

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
]
