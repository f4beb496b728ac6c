from marker_engine.ranking.builder import build_instance, build_instances
from marker_engine.ranking.models import (
    MarkerDetails,
    MarkerInstance,
    MarkerSummary,
    PriorityScore,
    ScoredMarker,
)
from marker_engine.ranking.ranker import PriorityRanker

__all__ = [
    "MarkerDetails",
    "MarkerInstance",
    "MarkerSummary",
    "PriorityRanker",
    "PriorityScore",
    "ScoredMarker",
    "build_instance",
    "build_instances",
]
