from marker_engine.positioning.models import MarkerPlacement
from marker_engine.registry.models import (
    AnatomicalMarkerType,
    BodyView,
    Lateralizable,
    MarkerTypeDefinition,
    Position,
)


def resolve_position(
    definition: MarkerTypeDefinition,
    laterality: str | None = None,
) -> Position:
    """Return the diagram coordinates for a marker type on the given side.

    Only ``"left"`` and ``"right"`` on a lateralizable anatomical type move
    the marker. Anything else (omitted, ``"bilateral"``, ``"none"``, midline
    types, status badges) yields the type's default position.
    """
    if not isinstance(definition, AnatomicalMarkerType):
        return definition.default_position
    layout = definition.laterality
    if not isinstance(layout, Lateralizable):
        return definition.default_position
    if laterality == "left":
        return layout.left
    if laterality == "right":
        return layout.right
    return definition.default_position


def resolve_placement(
    definition: MarkerTypeDefinition,
    laterality: str | None = None,
    body_view: BodyView | None = None,
) -> MarkerPlacement:
    """Combine the resolved position with the body view it is drawn on."""
    return MarkerPlacement(
        marker_type=definition.type,
        body_view=body_view or definition.default_body_view,
        position=resolve_position(definition, laterality),
    )
