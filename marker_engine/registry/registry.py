from collections.abc import Iterator, Sequence

from marker_engine.logging.logger import Log
from marker_engine.registry.models import MarkerTypeDefinition
from marker_engine.registry.validator import validate_catalog


class MarkerTypeRegistry:
    """Immutable, ordered catalog of marker type definitions.

    Iteration order is the family order followed by declaration order
    inside each family. The keyword resolver depends on this order.
    """

    def __init__(
        self,
        families: Sequence[tuple[str, Sequence[MarkerTypeDefinition]]],
    ) -> None:
        validate_catalog(families)
        self._families: tuple[tuple[str, tuple[MarkerTypeDefinition, ...]], ...] = tuple(
            (family, tuple(definitions)) for family, definitions in families
        )
        self._ordered: tuple[MarkerTypeDefinition, ...] = tuple(
            definition for _, definitions in self._families for definition in definitions
        )
        self._by_type: dict[str, MarkerTypeDefinition] = {
            definition.type: definition for definition in self._ordered
        }
        self._family_of: dict[str, str] = {
            definition.type: family
            for family, definitions in self._families
            for definition in definitions
        }
        self._keyword_index: tuple[tuple[str, MarkerTypeDefinition], ...] = tuple(
            (keyword, definition)
            for definition in self._ordered
            for keyword in definition.keywords
        )
        Log.info(
            f"Marker type registry built: {len(self._ordered)} types "
            f"in {len(self._families)} families",
            type_count=len(self._ordered),
            family_count=len(self._families),
        )

    def get(self, marker_type: str) -> MarkerTypeDefinition | None:
        """Return the definition for *marker_type*, or None when unknown."""
        return self._by_type.get(marker_type)

    def list_all(self) -> list[MarkerTypeDefinition]:
        return list(self._ordered)

    def list_by_family(self, family: str) -> list[MarkerTypeDefinition]:
        """Return the definitions of one family; empty for an unknown family."""
        for name, definitions in self._families:
            if name == family:
                return list(definitions)
        return []

    def list_status_badge_types(self) -> list[MarkerTypeDefinition]:
        return [d for d in self._ordered if d.is_status_badge]

    def list_anatomical_types(self) -> list[MarkerTypeDefinition]:
        return [d for d in self._ordered if not d.is_status_badge]

    def family_of(self, marker_type: str) -> str | None:
        return self._family_of.get(marker_type)

    @property
    def families(self) -> tuple[str, ...]:
        return tuple(family for family, _ in self._families)

    def keyword_index(self) -> tuple[tuple[str, MarkerTypeDefinition], ...]:
        """Return every (keyword, definition) pair in matching order."""
        return self._keyword_index

    def __contains__(self, marker_type: object) -> bool:
        return marker_type in self._by_type

    def __iter__(self) -> Iterator[MarkerTypeDefinition]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)
