from collections.abc import Iterable
from datetime import datetime, timedelta

from marker_engine.logging.logger import Log
from marker_engine.ranking.models import MarkerInstance, PriorityScore, ScoredMarker
from marker_engine.ranking.priority import (
    ATTENTION_BONUS,
    CATEGORY_WEIGHTS,
    COMPLICATIONS_WATCH_BONUS,
    DEFAULT_CATEGORY_WEIGHT,
    PENDING_CONFIRMATION_BONUS,
    PRIORITY_OVERRIDES,
    RECENT_12H_BONUS,
    RECENT_24H_BONUS,
)
from marker_engine.registry.registry import MarkerTypeRegistry

_RECENT_12H = timedelta(hours=12)
_RECENT_24H = timedelta(hours=24)


def is_displayable(instance: MarkerInstance) -> bool:
    """Active and not rejected."""
    return instance.is_active and instance.status != "rejected"


class PriorityRanker:
    """Scores marker instances and picks the top-N for compact displays.

    Stateless apart from the read-only registry; the same input snapshot and
    ``now`` always produce the same ranking.
    """

    def __init__(self, registry: MarkerTypeRegistry) -> None:
        self._registry = registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def score(self, instance: MarkerInstance, now: datetime) -> PriorityScore:
        """Compute the priority breakdown of one instance at time *now*."""
        return PriorityScore(
            base=CATEGORY_WEIGHTS.get(instance.category, DEFAULT_CATEGORY_WEIGHT),
            floor=PRIORITY_OVERRIDES.get(instance.marker_type, 0),
            attention=ATTENTION_BONUS if instance.requires_attention else 0,
            pending=(
                PENDING_CONFIRMATION_BONUS
                if instance.status == "pending_confirmation"
                else 0
            ),
            recency=self._recency_bonus(instance.created_at, now),
            complications=(
                COMPLICATIONS_WATCH_BONUS if instance.details.complications_watch else 0
            ),
        )

    def rank(
        self,
        instances: Iterable[MarkerInstance],
        limit: int,
        exclude_status_badges: bool,
        now: datetime,
    ) -> list[MarkerInstance]:
        """Return at most *limit* instances, highest priority first."""
        return [
            scored.instance
            for scored in self.rank_with_scores(
                instances, limit, exclude_status_badges, now
            )
        ]

    def rank_with_scores(
        self,
        instances: Iterable[MarkerInstance],
        limit: int,
        exclude_status_badges: bool,
        now: datetime,
    ) -> list[ScoredMarker]:
        """Like :meth:`rank`, keeping each instance's score breakdown."""
        if limit <= 0:
            return []
        candidates = [
            instance
            for instance in instances
            if self._is_candidate(instance, exclude_status_badges)
        ]
        scored = [ScoredMarker(instance, self.score(instance, now)) for instance in candidates]
        # sorted() is stable: equal totals keep their input order.
        scored = sorted(scored, key=lambda s: s.score.total, reverse=True)
        Log.debug(f"Ranked {len(scored)} candidate markers, returning up to {limit}")
        return scored[:limit]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_candidate(self, instance: MarkerInstance, exclude_status_badges: bool) -> bool:
        if not is_displayable(instance):
            return False
        if not exclude_status_badges:
            return True
        definition = self._registry.get(instance.marker_type)
        if definition is None:
            Log.warning(
                f"Marker {instance.id} references unknown type "
                f"{instance.marker_type!r}; ranking it as anatomical",
                marker_id=instance.id,
                marker_type=instance.marker_type,
            )
            return True
        return not definition.is_status_badge

    @staticmethod
    def _recency_bonus(created_at: datetime, now: datetime) -> int:
        """Bonus for markers created shortly before *now*.

        A timestamp ahead of *now* (clock skew between the record store and
        the caller) counts as created at *now*.
        """
        age = max(now - created_at, timedelta(0))
        if age <= _RECENT_12H:
            return RECENT_12H_BONUS
        if age <= _RECENT_24H:
            return RECENT_24H_BONUS
        return 0
