"""
Decode errors for GS1 Scanner.

A closed set of failure variants. They are returned inside a Failure,
never raised; `context`/`remainder` carry the text being processed when
decoding stopped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Union


class ErrorCode(str, Enum):
    """Error codes."""
    NOT_GS1_BARCODE = "NOT_GS1_BARCODE"
    AI_NOT_FOUND = "AI_NOT_FOUND"
    VALUE_TOO_SHORT = "VALUE_TOO_SHORT"
    SEPARATOR_NOT_FOUND = "SEPARATOR_NOT_FOUND"


@dataclass(frozen=True)
class NotGs1Barcode:
    """The barcode is empty, lacks the FNC1 prefix, or holds nothing after it."""
    code: ClassVar[ErrorCode] = ErrorCode.NOT_GS1_BARCODE

    @property
    def message(self) -> str:
        return "Barcode is not in GS1 format"

    def to_dict(self) -> Dict[str, Any]:
        return {'code': self.code.value, 'message': self.message}


@dataclass(frozen=True)
class AiNotFound:
    """No catalogue entry's code is a prefix of `remainder`."""
    remainder: str
    code: ClassVar[ErrorCode] = ErrorCode.AI_NOT_FOUND

    @property
    def message(self) -> str:
        return f"No application identifier matches {self.remainder!r}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code.value,
            'message': self.message,
            'remainder': self.remainder,
        }


@dataclass(frozen=True)
class ValueTooShort:
    """A fixed-length AI has fewer than `required_length` characters left."""
    ai_code: str
    required_length: int
    context: str
    code: ClassVar[ErrorCode] = ErrorCode.VALUE_TOO_SHORT

    @property
    def message(self) -> str:
        return (
            f"AI({self.ai_code}) needs {self.required_length} characters, "
            f"got {len(self.context)}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code.value,
            'message': self.message,
            'ai': self.ai_code,
            'required_length': self.required_length,
            'context': self.context,
        }


@dataclass(frozen=True)
class SeparatorNotFound:
    """A variable-length AI ran past its maximum length without a separator."""
    ai_code: str
    context: str
    code: ClassVar[ErrorCode] = ErrorCode.SEPARATOR_NOT_FOUND

    @property
    def message(self) -> str:
        return f"AI({self.ai_code}) exceeds its maximum length without a separator"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code.value,
            'message': self.message,
            'ai': self.ai_code,
            'context': self.context,
        }


DecodeError = Union[NotGs1Barcode, AiNotFound, ValueTooShort, SeparatorNotFound]
