"""
In-memory AI catalogue.

Keeps definitions in the order the host supplied them and indexes them in
a prefix trie. Lookups answer "first definition in catalogue order whose
code prefixes the text", which is what a linear scan would return.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import AiDefinition


class TrieNode:
    """Trie node for AI prefix matching."""
    __slots__ = ['children', 'position']

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        # Catalogue position of the definition whose code ends here
        self.position: Optional[int] = None


class AiCatalogue:
    """
    Ordered, read-only collection of AiDefinition records.

    Duplicate codes are tolerated; the earliest one wins, both for
    prefix matching and for `get`.
    """

    def __init__(self, definitions: Iterable[AiDefinition] = ()):
        self._definitions: Tuple[AiDefinition, ...] = tuple(definitions)
        self._root = TrieNode()
        for position, definition in enumerate(self._definitions):
            self._insert(definition.code, position)

    def _insert(self, code: str, position: int) -> None:
        node = self._root
        for char in code:
            node = node.children.setdefault(char, TrieNode())
        if node.position is None:
            node.position = position

    def find_first_match(self, text: str) -> Optional[AiDefinition]:
        """
        Return the first catalogue-order definition whose code is a prefix
        of `text`, or None. Walks the trie along `text` and keeps the lowest
        position seen, so a shorter code declared earlier beats a longer one.
        """
        node = self._root
        best: Optional[int] = None
        for char in text:
            node = node.children.get(char)
            if node is None:
                break
            if node.position is not None and (best is None or node.position < best):
                best = node.position
        return self._definitions[best] if best is not None else None

    def get(self, code: str) -> Optional[AiDefinition]:
        """Get a definition by exact code."""
        node = self._root
        for char in code:
            node = node.children.get(char)
            if node is None:
                return None
        return self._definitions[node.position] if node.position is not None else None

    def __contains__(self, code: str) -> bool:
        return self.get(code) is not None

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[AiDefinition]:
        return iter(self._definitions)

    def definitions(self) -> List[AiDefinition]:
        return list(self._definitions)
