from datetime import datetime, timedelta

import pytest

from marker_engine.ranking.models import MarkerInstance
from marker_engine.ranking.ranker import PriorityRanker
from marker_engine.ranking.summary import (
    active_markers,
    group_by_category,
    summarize,
    visible_on_view,
)
from marker_engine.registry.registry import MarkerTypeRegistry


def _make_instance(
    now: datetime, id: str, marker_type: str, category: str, **overrides
) -> MarkerInstance:
    return MarkerInstance(
        id=id,
        marker_type=marker_type,
        category=category,
        created_at=now - timedelta(days=3),
        **overrides,
    )


@pytest.fixture()
def instances(now: datetime) -> list[MarkerInstance]:
    return [
        _make_instance(now, "1", "diabetes", "chronic"),
        _make_instance(now, "2", "picc_line", "moderate", laterality="left"),
        _make_instance(now, "3", "central_line", "critical", requires_attention=True),
        _make_instance(now, "4", "fall_risk", "moderate"),
        _make_instance(now, "5", "nephrostomy_tube", "moderate"),
        _make_instance(now, "6", "seizure_disorder", "neurological", is_active=False),
        _make_instance(now, "7", "copd", "chronic", status="rejected"),
        _make_instance(now, "8", "ostomy", "moderate", status="pending_confirmation"),
    ]


class TestActiveMarkers:
    def test_filters_inactive_and_rejected(self, instances: list[MarkerInstance]) -> None:
        assert [m.id for m in active_markers(instances)] == ["1", "2", "3", "4", "5", "8"]


class TestGroupByCategory:
    def test_legend_order(self, instances: list[MarkerInstance]) -> None:
        grouped = group_by_category(instances)
        assert list(grouped) == ["critical", "chronic", "moderate"]
        assert [m.id for m in grouped["moderate"]] == ["2", "4", "5", "8"]

    def test_unknown_category_last(self, now: datetime) -> None:
        grouped = group_by_category(
            [
                _make_instance(now, "a", "mystery", "experimental"),
                _make_instance(now, "b", "diabetes", "chronic"),
            ]
        )
        assert list(grouped) == ["chronic", "experimental"]

    def test_empty(self) -> None:
        assert group_by_category([]) == {}


class TestVisibleOnView:
    def test_front(self, instances: list[MarkerInstance], registry: MarkerTypeRegistry) -> None:
        front = visible_on_view(instances, "front", registry)
        assert [m.id for m in front] == ["1", "2", "3", "8"]

    def test_back(self, instances: list[MarkerInstance], registry: MarkerTypeRegistry) -> None:
        assert [m.id for m in visible_on_view(instances, "back", registry)] == ["5"]

    def test_explicit_view_wins(self, now: datetime, registry: MarkerTypeRegistry) -> None:
        marker = _make_instance(now, "x", "picc_line", "moderate", body_view="back")
        assert visible_on_view([marker], "back", registry) == [marker]
        assert visible_on_view([marker], "front", registry) == []

    def test_unknown_type_needs_explicit_view(
        self, now: datetime, registry: MarkerTypeRegistry
    ) -> None:
        bare = _make_instance(now, "x", "mystery", "moderate")
        placed = _make_instance(now, "y", "mystery", "moderate", body_view="front")
        assert visible_on_view([bare, placed], "front", registry) == [placed]


class TestSummarize:
    def test_counts_and_top(
        self, instances: list[MarkerInstance], registry: MarkerTypeRegistry, now: datetime
    ) -> None:
        summary = summarize(instances, PriorityRanker(registry), now, 2, True)
        assert summary.active_count == 6
        assert summary.pending_count == 1
        assert summary.attention_count == 1
        assert [m.id for m in summary.top] == ["3", "8"]

    def test_badges_included_when_not_excluded(
        self, instances: list[MarkerInstance], registry: MarkerTypeRegistry, now: datetime
    ) -> None:
        summary = summarize(instances, PriorityRanker(registry), now, 10, False)
        assert "4" in [m.id for m in summary.top]

    def test_empty(self, registry: MarkerTypeRegistry, now: datetime) -> None:
        summary = summarize([], PriorityRanker(registry), now, 5, True)
        assert (summary.active_count, summary.pending_count, summary.top) == (0, 0, [])
