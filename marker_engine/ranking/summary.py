"""Body-map list and summary helpers built on top of the ranker."""

from collections.abc import Iterable
from datetime import datetime

from marker_engine.ranking.models import MarkerInstance, MarkerSummary
from marker_engine.ranking.ranker import PriorityRanker, is_displayable
from marker_engine.registry.models import CATEGORY_DISPLAY_ORDER, BodyView
from marker_engine.registry.registry import MarkerTypeRegistry


def active_markers(instances: Iterable[MarkerInstance]) -> list[MarkerInstance]:
    return [instance for instance in instances if is_displayable(instance)]


def group_by_category(
    instances: Iterable[MarkerInstance],
) -> dict[str, list[MarkerInstance]]:
    """Group active markers by category in legend order.

    Categories outside the legend follow in order of first appearance.
    Empty groups are omitted.
    """
    grouped: dict[str, list[MarkerInstance]] = {}
    for instance in active_markers(instances):
        grouped.setdefault(instance.category, []).append(instance)
    ordered = {c: grouped[c] for c in CATEGORY_DISPLAY_ORDER if c in grouped}
    for category, members in grouped.items():
        ordered.setdefault(category, members)
    return ordered


def visible_on_view(
    instances: Iterable[MarkerInstance],
    view: BodyView,
    registry: MarkerTypeRegistry,
) -> list[MarkerInstance]:
    """Active markers drawn on the body for the given view.

    Status badges never appear on the body. Markers of unknown type are
    drawn only when they carry an explicit body view.
    """
    visible: list[MarkerInstance] = []
    for instance in active_markers(instances):
        definition = registry.get(instance.marker_type)
        if definition is not None and definition.is_status_badge:
            continue
        marker_view = instance.body_view
        if marker_view is None and definition is not None:
            marker_view = definition.default_body_view
        if marker_view == view:
            visible.append(instance)
    return visible


def summarize(
    instances: Iterable[MarkerInstance],
    ranker: PriorityRanker,
    now: datetime,
    limit: int,
    exclude_status_badges: bool,
) -> MarkerSummary:
    """Counts for the summary card header plus the top-ranked markers."""
    active = active_markers(instances)
    return MarkerSummary(
        active_count=len(active),
        pending_count=sum(1 for m in active if m.status == "pending_confirmation"),
        attention_count=sum(1 for m in active if m.requires_attention),
        top=ranker.rank(active, limit, exclude_status_badges, now),
    )
