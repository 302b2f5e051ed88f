"""
AI resolution: find the catalogue entry that starts the remaining barcode.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from ..result import Result, of_nullable
from .catalogue import AiCatalogue
from .errors import AiNotFound, DecodeError
from .models import AiDefinition


def resolve(
    remainder: str,
    catalogue: Union[AiCatalogue, Iterable[AiDefinition]],
) -> Result[AiDefinition, DecodeError]:
    """
    Find the first definition, in catalogue order, whose code is a literal
    prefix of `remainder`.

    Returns:
        Success(AiDefinition) or Failure(AiNotFound(remainder))
    """
    match: Optional[AiDefinition]
    if isinstance(catalogue, AiCatalogue):
        match = catalogue.find_first_match(remainder)
    else:
        match = next((ai for ai in catalogue if remainder.startswith(ai.code)), None)
    return of_nullable(match, AiNotFound(remainder))
