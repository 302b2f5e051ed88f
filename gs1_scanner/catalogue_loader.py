"""
AI Catalogue Loader for GS1 Scanner

Loads the Application Identifier catalogue from JSON. Each record has the
shape:

    {
      "id": "01", "length": 14, "description": "...", "dataTitle": "GTIN",
      "fnc1": false, "decimals": 0, "shortName": "GTIN", "dataType": "N"
    }

where `fnc1` marks variable-length AIs that end with a group separator.
Record order is kept: it decides which AI wins when codes overlap.

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from .core.catalogue import AiCatalogue
from .core.models import AiDefinition


logger = logging.getLogger(__name__)

DEFAULT_CATALOGUE_PATH = Path(__file__).parent / "data" / "gs1.json"

_cached_catalogue: Optional[AiCatalogue] = None
_cached_catalogue_path: Optional[Path] = None


def catalogue_from_json(json_str: str) -> AiCatalogue:
    """
    Build a catalogue from a JSON array of records.

    Raises:
        ValueError: malformed JSON, a top level that is not a list, or an
            invalid record
    """
    data: Any = json.loads(json_str)
    if not isinstance(data, list):
        raise ValueError("AI catalogue must be a JSON array of records")
    definitions: List[AiDefinition] = [AiDefinition.from_record(record) for record in data]
    return AiCatalogue(definitions)


def catalogue_to_json(catalogue: AiCatalogue) -> str:
    """Export a catalogue to JSON, preserving order."""
    return json.dumps([definition.to_record() for definition in catalogue], indent=2)


def load_catalogue(
    json_path: Optional[Path] = None,
    force_reload: bool = False
) -> AiCatalogue:
    """
    Load the AI catalogue, using cache when possible.

    Args:
        json_path: Optional path to a JSON catalogue; defaults to the
            packaged gs1.json.
        force_reload: Force reload even if cached.

    Returns:
        AiCatalogue ready for use.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: the file is not a valid catalogue
    """
    global _cached_catalogue, _cached_catalogue_path

    path = Path(json_path) if json_path else DEFAULT_CATALOGUE_PATH
    if _cached_catalogue is not None and not force_reload and _cached_catalogue_path == path:
        return _cached_catalogue

    catalogue = catalogue_from_json(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d AI definitions from %s", len(catalogue), path)

    _cached_catalogue = catalogue
    _cached_catalogue_path = path
    return catalogue


def save_catalogue(catalogue: AiCatalogue, json_path: Path) -> None:
    """Save a catalogue to a JSON file."""
    with open(json_path, 'w', encoding='utf-8') as f:
        f.write(catalogue_to_json(catalogue))
