"""
Field decoding for a single Application Identifier.

Given a matched AI and the text that follows its code, extract the value
and report how many characters of that text were consumed.

Key GS1 rules:
- Fixed-length AIs occupy exactly `max_length` characters, no separator
- Variable-length AIs end at the group separator, or at the end of the
  barcode when they are the last element
- Measurement AIs carry implied decimal positions; the decimal point is
  inserted for display only and never counts towards consumed input
"""

from __future__ import annotations

from typing import Tuple

from ..result import Failure, Result, Success
from .errors import DecodeError, SeparatorNotFound, ValueTooShort
from .models import AiDefinition, DecodedField


def insert_decimal_point(raw_value: str, decimal_places: int) -> str:
    """
    Insert a decimal point after the first `decimal_places` characters.

    Example: ("001125", 3) -> "001.125"
    """
    if decimal_places <= 0:
        return raw_value
    return f"{raw_value[:decimal_places]}.{raw_value[decimal_places:]}"


def _extract_fixed(ai: AiDefinition, text: str) -> Result[Tuple[str, int], DecodeError]:
    if len(text) < ai.max_length:
        return Failure(ValueTooShort(ai.code, ai.max_length, text))
    return Success((text[:ai.max_length], ai.max_length))


def _extract_variable(
    ai: AiDefinition,
    text: str,
    group_separator: str,
) -> Result[Tuple[str, int], DecodeError]:
    gs_index = text.find(group_separator)
    if 0 <= gs_index <= ai.max_length:
        return Success((text[:gs_index], gs_index + len(group_separator)))
    if gs_index < 0 and len(text) <= ai.max_length:
        # Last element in the barcode, no separator needed
        return Success((text, len(text)))
    return Failure(SeparatorNotFound(ai.code, ai.code + text))


def decode_field(
    ai: AiDefinition,
    text_after_code: str,
    group_separator: str,
) -> Result[Tuple[DecodedField, int], DecodeError]:
    """
    Decode the value of `ai` from the text following its code.

    Args:
        ai: The matched AI definition
        text_after_code: Remaining barcode with the AI code already stripped
        group_separator: Separator that terminates variable-length values

    Returns:
        Success((DecodedField, consumed_length)) where consumed_length counts
        characters of `text_after_code` including a consumed separator, or
        Failure(ValueTooShort | SeparatorNotFound)
    """
    if ai.requires_separator:
        extracted = _extract_variable(ai, text_after_code, group_separator)
    else:
        extracted = _extract_fixed(ai, text_after_code)

    return extracted.map(
        lambda raw_and_consumed: (
            DecodedField(ai, insert_decimal_point(raw_and_consumed[0], ai.decimal_places)),
            raw_and_consumed[1],
        )
    )
