from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from marker_engine.registry.models import BodyView

MarkerStatus = Literal["pending_confirmation", "confirmed", "rejected"]
MarkerLaterality = Literal["left", "right", "bilateral", "none"]

VALID_STATUSES = frozenset({"pending_confirmation", "confirmed", "rejected"})
VALID_LATERALITIES = frozenset({"left", "right", "bilateral", "none"})


@dataclass
class MarkerDetails:
    """Free-form clinical details attached to a marker instance."""

    complications_watch: list[str] = field(default_factory=list)


@dataclass
class MarkerInstance:
    """Snapshot of one patient marker, as read from the clinical record store."""

    id: str
    marker_type: str
    category: str
    created_at: datetime
    laterality: MarkerLaterality = "none"
    status: MarkerStatus = "confirmed"
    is_active: bool = True
    requires_attention: bool = False
    body_view: BodyView | None = None
    details: MarkerDetails = field(default_factory=MarkerDetails)


@dataclass(frozen=True)
class PriorityScore:
    """Breakdown of a marker's priority; ``total`` is what ranking sorts on."""

    base: int
    floor: int = 0
    attention: int = 0
    pending: int = 0
    recency: int = 0
    complications: int = 0

    @property
    def total(self) -> int:
        return (
            max(self.base, self.floor)
            + self.attention
            + self.pending
            + self.recency
            + self.complications
        )


@dataclass(frozen=True)
class ScoredMarker:
    instance: MarkerInstance
    score: PriorityScore


@dataclass
class MarkerSummary:
    """Compact view of a patient's markers for list views and summary cards."""

    active_count: int
    pending_count: int
    attention_count: int
    top: list[MarkerInstance] = field(default_factory=list)
