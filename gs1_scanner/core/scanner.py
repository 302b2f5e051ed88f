"""
GS1 Barcode Scanner

Decodes GS1 element strings that start with a symbology prefix (FNC1),
e.g. "]C1" for GS1-128, into an ordered list of AI fields.

The scan is a loop over the unconsumed part of the barcode:
resolve the AI, decode its value, append, advance. The first error stops
the scan; no partial result is returned.

Example:
    >>> scanner = GS1Scanner.default().unwrap()
    >>> result = scanner.decode("]C10112345678901234").unwrap()
    >>> result.find_first_by_code("01").value
    '12345678901234'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from ..config import DEFAULT_FNC1, DEFAULT_GROUP_SEPARATOR, ScannerOptions
from ..result import Failure, Result, Success
from .catalogue import AiCatalogue
from .errors import DecodeError, NotGs1Barcode
from .field_decoder import decode_field
from .models import AiDefinition, DecodedField, DecodeResult
from .resolver import resolve


logger = logging.getLogger(__name__)


class GS1Scanner:
    """
    Decoder for FNC1-prefixed GS1 barcodes.

    A scanner holds only its prefix, its separator and a read-only
    catalogue, so one instance can be shared between threads.
    """

    def __init__(
        self,
        fnc1: str = DEFAULT_FNC1,
        group_separator: str = DEFAULT_GROUP_SEPARATOR,
        catalogue: Union[AiCatalogue, Iterable[AiDefinition]] = (),
    ):
        if not fnc1:
            raise ValueError("fnc1 prefix must not be empty")
        if not group_separator:
            raise ValueError("group separator must not be empty")
        self.fnc1 = fnc1
        self.group_separator = group_separator
        self.catalogue = (
            catalogue if isinstance(catalogue, AiCatalogue) else AiCatalogue(catalogue)
        )

    def is_gs1_format(self, barcode: str) -> bool:
        """True if `barcode` starts with the FNC1 prefix and has data after it."""
        if not barcode:
            return False
        return barcode.startswith(self.fnc1) and len(barcode) > len(self.fnc1)

    def decode(self, barcode: str) -> Result[DecodeResult, DecodeError]:
        """
        Decode a GS1 barcode.

        Returns:
            Success(DecodeResult) with every field in order of occurrence, or
            Failure with the first DecodeError met while scanning
        """
        if not self.is_gs1_format(barcode):
            logger.debug("Not a GS1 barcode: %r", barcode)
            return Failure(NotGs1Barcode())

        result = DecodeResult(barcode)
        remainder = barcode[len(self.fnc1):]

        while remainder:
            step = self._decode_next(remainder)
            if isinstance(step, Failure):
                logger.debug("Decoding %r failed: %s", barcode, step.error.message)
                return step
            decoded, remainder = step.value
            logger.debug("Decoded AI(%s) = %r", decoded.code, decoded.value)
            result = result.with_field(decoded)

        return Success(result)

    def _decode_next(self, remainder: str) -> Result[Tuple[DecodedField, str], DecodeError]:
        """Decode the field at the front of `remainder` and return what is left."""
        return (
            resolve(remainder, self.catalogue)
            .flat_map(lambda ai: decode_field(ai, remainder[len(ai.code):], self.group_separator))
            .map(lambda decoded: (decoded[0], self._advance(remainder, decoded[0], decoded[1])))
        )

    def _advance(self, remainder: str, decoded: DecodedField, consumed: int) -> str:
        rest = remainder[len(decoded.code) + consumed:]
        # A separator may also follow a fixed-length AI
        if rest.startswith(self.group_separator):
            rest = rest[len(self.group_separator):]
        return rest

    @classmethod
    def default(
        cls,
        fnc1: str = DEFAULT_FNC1,
        group_separator: str = DEFAULT_GROUP_SEPARATOR,
        catalogue_path: Optional[Path] = None,
    ) -> Result['GS1Scanner', Exception]:
        """
        Build a scanner from the packaged JSON catalogue, or from
        `catalogue_path` when given.

        Returns:
            Success(GS1Scanner) or Failure(exception raised while loading
            the catalogue or validating the configuration)
        """
        from ..catalogue_loader import load_catalogue

        try:
            catalogue = load_catalogue(catalogue_path)
            scanner = cls(fnc1, group_separator, catalogue)
        except (OSError, ValueError) as exc:
            logger.warning("Unable to build scanner: %s", exc)
            return Failure(exc)
        return Success(scanner)

    @classmethod
    def from_options(cls, options: ScannerOptions) -> Result['GS1Scanner', Exception]:
        return cls.default(options.fnc1, options.group_separator, options.catalogue_path)
