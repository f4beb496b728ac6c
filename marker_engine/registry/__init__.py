from marker_engine.registry.models import (
    AnatomicalMarkerType,
    Lateralizable,
    MarkerTypeDefinition,
    Midline,
    Position,
    StatusBadgeType,
)
from marker_engine.registry.registry import MarkerTypeRegistry

__all__ = [
    "AnatomicalMarkerType",
    "Lateralizable",
    "MarkerTypeDefinition",
    "MarkerTypeRegistry",
    "Midline",
    "Position",
    "StatusBadgeType",
]
