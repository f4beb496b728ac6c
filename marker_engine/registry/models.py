from dataclasses import dataclass, field
from typing import ClassVar, Literal

MarkerCategory = Literal[
    "critical",
    "moderate",
    "informational",
    "monitoring",
    "chronic",
    "neurological",
]
BodyView = Literal["front", "back"]

VALID_CATEGORIES = frozenset(
    {"critical", "moderate", "informational", "monitoring", "chronic", "neurological"}
)
VALID_BODY_VIEWS = frozenset({"front", "back"})

# Legend order used when grouping markers for display.
CATEGORY_DISPLAY_ORDER: tuple[str, ...] = (
    "critical",
    "neurological",
    "chronic",
    "moderate",
    "monitoring",
    "informational",
)
CATEGORY_LABELS: dict[str, str] = {
    "critical": "Critical",
    "neurological": "Neurological",
    "chronic": "Chronic",
    "moderate": "Moderate",
    "monitoring": "Monitoring",
    "informational": "Info",
}


@dataclass(frozen=True)
class Position:
    """Point on the body diagram, as percentages of its bounding box."""

    x: float
    y: float


@dataclass(frozen=True)
class Lateralizable:
    """Layout of a marker type that is placed differently per body side."""

    left: Position
    right: Position


@dataclass(frozen=True)
class Midline:
    """Layout of a marker type that ignores laterality."""


LateralityLayout = Lateralizable | Midline


@dataclass(frozen=True, kw_only=True)
class MarkerTypeDefinition:
    """Fields shared by every catalog entry."""

    is_status_badge: ClassVar[bool] = False

    type: str
    display_name: str
    category: MarkerCategory
    default_body_region: str
    default_body_view: BodyView
    default_position: Position
    keywords: tuple[str, ...]
    icd10: str | None = None


@dataclass(frozen=True, kw_only=True)
class AnatomicalMarkerType(MarkerTypeDefinition):
    """A marker drawn at an anatomical location on the body diagram."""

    laterality: LateralityLayout = field(default_factory=Midline)


@dataclass(frozen=True, kw_only=True)
class StatusBadgeType(MarkerTypeDefinition):
    """An always-visible indicator shown around the body, not on it."""

    is_status_badge: ClassVar[bool] = True

    badge_color: str
    badge_icon: str
