"""
Value objects for GS1 Scanner.

AiDefinition describes one Application Identifier from the catalogue,
DecodedField pairs a definition with the value found in a barcode, and
DecodeResult is the success payload of a full decode.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterator, List, Optional, Tuple

AI_CODE_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class AiDefinition:
    """
    Represents a single GS1 Application Identifier definition.

    Attributes:
        code: AI code, matched as a literal prefix of the barcode (e.g. "01")
        max_length: Exact data length for fixed AIs, maximum for variable AIs
        requires_separator: True for variable-length AIs terminated by GS
        decimal_places: Implied decimal positions (0 = none)
        title: Data title, e.g. "GTIN"
        short_name: Short name
        data_type: Data type label, e.g. "N" or "X"
        description: Human-readable description
    """
    code: str
    max_length: int
    requires_separator: bool = False
    decimal_places: int = 0
    title: str = ""
    short_name: str = ""
    data_type: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not AI_CODE_PATTERN.fullmatch(self.code):
            raise ValueError(f"AI code must be a non-empty digit string, got {self.code!r}")
        if self.max_length <= 0:
            raise ValueError(f"AI({self.code}) max_length must be positive")
        if self.decimal_places < 0:
            raise ValueError(f"AI({self.code}) decimal_places must not be negative")

    @property
    def is_fixed_length(self) -> bool:
        return not self.requires_separator

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'AiDefinition':
        """Build a definition from a catalogue JSON record."""
        if not isinstance(record, dict):
            raise ValueError(f"Catalogue record must be an object, got {record!r}")
        fnc1 = record.get('fnc1', False)
        if not isinstance(fnc1, bool):
            raise ValueError(f"Catalogue record {record.get('id')!r} has non-boolean fnc1 {fnc1!r}")
        try:
            return cls(
                code=str(record['id']),
                max_length=int(record['length']),
                requires_separator=fnc1,
                decimal_places=int(record.get('decimals', 0) or 0),
                title=record.get('dataTitle', ''),
                short_name=record.get('shortName', ''),
                data_type=record.get('dataType', ''),
                description=record.get('description', ''),
            )
        except KeyError as e:
            raise ValueError(f"Catalogue record is missing field {e}") from e
        except TypeError as e:
            raise ValueError(f"Invalid catalogue record {record!r}: {e}") from e

    def to_record(self) -> Dict[str, Any]:
        """Inverse of from_record."""
        return {
            'id': self.code,
            'length': self.max_length,
            'description': self.description,
            'dataTitle': self.title,
            'fnc1': self.requires_separator,
            'decimals': self.decimal_places,
            'shortName': self.short_name,
            'dataType': self.data_type,
        }


@dataclass(frozen=True)
class DecodedField:
    """An AI occurrence decoded from a barcode."""
    ai: AiDefinition
    value: str

    @property
    def code(self) -> str:
        return self.ai.code

    @property
    def decimal_value(self) -> Optional[Decimal]:
        """
        The displayed value parsed as a Decimal, None when no decimals apply.

        This reads `value` as shown, with the point after the first
        `decimal_places` characters. It is not the GS1 measurement, which
        counts decimals from the right: AI 3102 with raw "000250" gives
        Decimal("0.0250") here, not 2.50.
        """
        if self.ai.decimal_places == 0:
            return None
        try:
            return Decimal(self.value)
        except InvalidOperation:
            return None


@dataclass(frozen=True)
class DecodeResult:
    """
    Result of decoding a GS1 barcode.

    Attributes:
        barcode: The original barcode string, FNC1 prefix included
        fields: Decoded fields in order of occurrence (codes may repeat)
    """
    barcode: str
    fields: Tuple[DecodedField, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[DecodedField]:
        return iter(self.fields)

    def find_first_by_code(self, code: str) -> Optional[DecodedField]:
        """Return the first field decoded for `code`, or None."""
        for decoded in self.fields:
            if decoded.ai.code == code:
                return decoded
        return None

    def codes(self) -> List[str]:
        return [decoded.ai.code for decoded in self.fields]

    def with_field(self, decoded: DecodedField) -> 'DecodeResult':
        """Return a copy with `decoded` appended."""
        return DecodeResult(self.barcode, self.fields + (decoded,))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'barcode': self.barcode,
            'fields': [
                {
                    'ai': decoded.ai.code,
                    'title': decoded.ai.title,
                    'short_name': decoded.ai.short_name,
                    'value': decoded.value,
                }
                for decoded in self.fields
            ],
        }
