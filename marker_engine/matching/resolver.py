"""Deterministic two-pass keyword matching.

1. Normalize the input text.
2. Exact pass: the first type owning a keyword equal to the text wins.
3. Substring pass: scan (type, keyword) pairs in registry order and pick a
   type whose keyword occurs inside the text.

Both passes follow the registry order, so the family and declaration order
of the catalog decide which type wins when keywords overlap.
"""

from marker_engine.logging.logger import Log
from marker_engine.matching.base import BaseKeywordResolver
from marker_engine.matching.text import TextNormalizer
from marker_engine.registry.models import MarkerTypeDefinition
from marker_engine.registry.registry import MarkerTypeRegistry


class KeywordResolver(BaseKeywordResolver):
    """First-match-wins resolver: the earliest matching pair in registry order."""

    def __init__(
        self,
        registry: MarkerTypeRegistry,
        normalizer: TextNormalizer | None = None,
    ) -> None:
        self._registry = registry
        self._normalizer = normalizer or TextNormalizer()
        self._pairs = registry.keyword_index()
        self._exact: dict[str, MarkerTypeDefinition] = {}
        for keyword, definition in self._pairs:
            self._exact.setdefault(keyword, definition)

    def resolve(self, text: str) -> MarkerTypeDefinition | None:
        normalized = self._normalizer.normalize(text)
        if not normalized:
            return None
        match = self._exact.get(normalized)
        if match is None:
            match = self._substring_match(normalized)
        if match is None:
            Log.debug(f"No marker type matched text ({len(normalized)} chars)")
        else:
            Log.debug(f"Resolved text to marker type {match.type}", marker_type=match.type)
        return match

    def _substring_match(self, normalized: str) -> MarkerTypeDefinition | None:
        for keyword, definition in self._pairs:
            if keyword in normalized:
                return definition
        return None


class MostSpecificKeywordResolver(KeywordResolver):
    """Same exact pass; the substring pass prefers the longest keyword.

    Ties on keyword length go to the earliest pair in registry order.
    """

    def _substring_match(self, normalized: str) -> MarkerTypeDefinition | None:
        best: MarkerTypeDefinition | None = None
        best_length = 0
        for keyword, definition in self._pairs:
            if len(keyword) > best_length and keyword in normalized:
                best = definition
                best_length = len(keyword)
        return best
