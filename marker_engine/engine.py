from collections.abc import Iterable
from datetime import datetime, timezone

from marker_engine.config.settings import Settings
from marker_engine.logging.logger import Log
from marker_engine.matching.base import BaseKeywordResolver
from marker_engine.matching.factory import KeywordResolverFactory
from marker_engine.positioning.models import MarkerPlacement
from marker_engine.positioning.resolver import resolve_placement, resolve_position
from marker_engine.ranking.models import MarkerInstance, MarkerSummary
from marker_engine.ranking.ranker import PriorityRanker
from marker_engine.ranking.summary import summarize
from marker_engine.registry.default import DEFAULT_REGISTRY
from marker_engine.registry.models import MarkerTypeDefinition, Position
from marker_engine.registry.registry import MarkerTypeRegistry


class MarkerEngine:
    """Facade over the registry, keyword resolver, positioning and ranker.

    Flow: text -> resolve -> marker type -> (instance created by the record
    store) -> position for rendering / rank for summaries.
    """

    def __init__(
        self,
        registry: MarkerTypeRegistry,
        resolver: BaseKeywordResolver,
        ranker: PriorityRanker,
        settings: Settings,
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._ranker = ranker
        self._settings = settings

    @property
    def registry(self) -> MarkerTypeRegistry:
        return self._registry

    def resolve(self, text: str) -> MarkerTypeDefinition | None:
        return self._resolver.resolve(text)

    def resolve_position(
        self,
        definition: MarkerTypeDefinition,
        laterality: str | None = None,
    ) -> Position:
        return resolve_position(definition, laterality)

    def place(self, text: str, laterality: str | None = None) -> MarkerPlacement | None:
        """Resolve *text* to a marker type and place it on the diagram."""
        definition = self._resolver.resolve(text)
        if definition is None:
            return None
        return resolve_placement(definition, laterality)

    def rank(
        self,
        instances: Iterable[MarkerInstance],
        limit: int | None = None,
        exclude_status_badges: bool | None = None,
        now: datetime | None = None,
    ) -> list[MarkerInstance]:
        """Top-N markers; unset arguments fall back to the summary settings."""
        return self._ranker.rank(
            instances,
            self._settings.summary_limit if limit is None else limit,
            (
                self._settings.summary_exclude_status_badges
                if exclude_status_badges is None
                else exclude_status_badges
            ),
            now or datetime.now(timezone.utc),
        )

    def summarize(
        self,
        instances: Iterable[MarkerInstance],
        now: datetime | None = None,
    ) -> MarkerSummary:
        return summarize(
            instances,
            self._ranker,
            now or datetime.now(timezone.utc),
            self._settings.summary_limit,
            self._settings.summary_exclude_status_badges,
        )


def build_engine(
    settings: Settings | None = None,
    registry: MarkerTypeRegistry | None = None,
) -> MarkerEngine:
    """Build a MarkerEngine from settings, using the bundled catalog by default."""
    settings = settings or Settings()
    Log.configure(settings.log_level)
    if registry is None:
        registry = DEFAULT_REGISTRY
    resolver = KeywordResolverFactory.create(settings, registry)
    ranker = PriorityRanker(registry)
    return MarkerEngine(
        registry=registry,
        resolver=resolver,
        ranker=ranker,
        settings=settings,
    )
