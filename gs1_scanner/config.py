"""
Scanner configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


DEFAULT_FNC1 = "]C1"
DEFAULT_GROUP_SEPARATOR = "<GS>"

FNC1_ENV = "GS1_SCANNER_FNC1"
GROUP_SEPARATOR_ENV = "GS1_SCANNER_GS"
CATALOGUE_ENV = "GS1_SCANNER_CATALOGUE"


@dataclass(frozen=True)
class ScannerOptions:
    """
    Configuration options for a GS1Scanner.

    Attributes:
        fnc1: Symbology prefix marking a GS1 payload
        group_separator: Text that terminates variable-length values
        catalogue_path: Optional JSON catalogue; None uses the packaged one
    """
    fnc1: str = DEFAULT_FNC1
    group_separator: str = DEFAULT_GROUP_SEPARATOR
    catalogue_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> 'ScannerOptions':
        """Build options from GS1_SCANNER_* environment variables.

        Unset and empty variables both fall back to the defaults.
        """
        catalogue = os.getenv(CATALOGUE_ENV, "")
        return cls(
            fnc1=os.getenv(FNC1_ENV) or DEFAULT_FNC1,
            group_separator=os.getenv(GROUP_SEPARATOR_ENV) or DEFAULT_GROUP_SEPARATOR,
            catalogue_path=Path(catalogue) if catalogue else None,
        )
