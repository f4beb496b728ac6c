from dataclasses import dataclass

from marker_engine.registry.models import BodyView, Position


@dataclass(frozen=True)
class MarkerPlacement:
    """Where the rendering surface should draw one marker."""

    marker_type: str
    body_view: BodyView
    position: Position
