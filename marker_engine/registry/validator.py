"""Validates the marker type catalog against its build-time invariants."""

from collections.abc import Iterable, Sequence

from marker_engine.registry.exceptions import (
    DuplicateMarkerTypeError,
    InvalidKeywordError,
    InvalidMarkerTypeError,
    InvalidPositionError,
    RegistryError,
)
from marker_engine.registry.models import (
    VALID_BODY_VIEWS,
    VALID_CATEGORIES,
    AnatomicalMarkerType,
    Lateralizable,
    MarkerTypeDefinition,
    Midline,
    Position,
    StatusBadgeType,
)

_MIN_COORD = 0
_MAX_COORD = 100


def validate_catalog(
    families: Sequence[tuple[str, Sequence[MarkerTypeDefinition]]],
) -> None:
    """Check every family and definition of a catalog.

    Raises:
        RegistryError: (or a subclass) on the first violation found.
    """
    seen_families: set[str] = set()
    seen_types: set[str] = set()
    for family, definitions in families:
        if not family:
            raise RegistryError("Family name must be a non-empty string")
        if family in seen_families:
            raise RegistryError(f"Duplicate marker family: {family}")
        seen_families.add(family)
        for definition in definitions:
            validate_definition(definition)
            if definition.type in seen_types:
                raise DuplicateMarkerTypeError(
                    f"Duplicate marker type: {definition.type} (family {family})"
                )
            seen_types.add(definition.type)


def validate_definition(definition: MarkerTypeDefinition) -> None:
    """Check a single catalog entry."""
    if not isinstance(definition, (AnatomicalMarkerType, StatusBadgeType)):
        raise InvalidMarkerTypeError(
            f"Unsupported marker type variant: {type(definition).__name__}"
        )
    if not definition.type:
        raise InvalidMarkerTypeError("Marker 'type' must be a non-empty string")
    if not definition.display_name:
        raise InvalidMarkerTypeError(
            f"Marker {definition.type}: 'display_name' must be a non-empty string"
        )
    if definition.category not in VALID_CATEGORIES:
        raise InvalidMarkerTypeError(
            f"Marker {definition.type}: 'category' must be one of "
            f"{sorted(VALID_CATEGORIES)}, got {definition.category!r}"
        )
    if definition.default_body_view not in VALID_BODY_VIEWS:
        raise InvalidMarkerTypeError(
            f"Marker {definition.type}: 'default_body_view' must be one of "
            f"{sorted(VALID_BODY_VIEWS)}, got {definition.default_body_view!r}"
        )
    _check_position(definition.type, "default_position", definition.default_position)
    _check_keywords(definition.type, definition.keywords)
    if isinstance(definition, AnatomicalMarkerType):
        _check_laterality(definition)
    else:
        _check_badge(definition)


def _check_position(marker_type: str, label: str, position: Position) -> None:
    for axis, value in (("x", position.x), ("y", position.y)):
        if not isinstance(value, (int, float)) or not _MIN_COORD <= value <= _MAX_COORD:
            raise InvalidPositionError(
                f"Marker {marker_type}: '{label}.{axis}' must be within "
                f"[{_MIN_COORD}, {_MAX_COORD}], got {value!r}"
            )


def _check_keywords(marker_type: str, keywords: Iterable[str]) -> None:
    keywords = tuple(keywords)
    if not keywords:
        raise InvalidKeywordError(f"Marker {marker_type}: at least one keyword is required")
    seen: set[str] = set()
    for keyword in keywords:
        if not isinstance(keyword, str) or not keyword.strip():
            raise InvalidKeywordError(
                f"Marker {marker_type}: keywords must be non-empty strings"
            )
        # Resolver input is folded to lowercase ASCII with single spaces.
        if keyword != " ".join(keyword.lower().split()) or not keyword.isascii():
            raise InvalidKeywordError(
                f"Marker {marker_type}: keyword {keyword!r} is not normalized"
            )
        if keyword in seen:
            raise InvalidKeywordError(
                f"Marker {marker_type}: duplicate keyword {keyword!r}"
            )
        seen.add(keyword)


def _check_laterality(definition: AnatomicalMarkerType) -> None:
    layout = definition.laterality
    if isinstance(layout, Midline):
        return
    if not isinstance(layout, Lateralizable):
        raise InvalidMarkerTypeError(
            f"Marker {definition.type}: 'laterality' must be Lateralizable or Midline"
        )
    _check_position(definition.type, "laterality.left", layout.left)
    _check_position(definition.type, "laterality.right", layout.right)


def _check_badge(definition: StatusBadgeType) -> None:
    if not definition.badge_color or not definition.badge_icon:
        raise InvalidMarkerTypeError(
            f"Marker {definition.type}: status badges need 'badge_color' and 'badge_icon'"
        )
