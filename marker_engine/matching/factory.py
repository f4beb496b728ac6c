from marker_engine.config.settings import Settings
from marker_engine.matching.base import BaseKeywordResolver
from marker_engine.matching.resolver import KeywordResolver, MostSpecificKeywordResolver
from marker_engine.registry.registry import MarkerTypeRegistry


class KeywordResolverFactory:
    """Creates the keyword resolver selected by settings."""

    STRATEGIES: dict[str, type[KeywordResolver]] = {
        "first_match": KeywordResolver,
        "most_specific": MostSpecificKeywordResolver,
    }

    @classmethod
    def create(cls, settings: Settings, registry: MarkerTypeRegistry) -> BaseKeywordResolver:
        strategy = settings.keyword_match_strategy.lower()
        resolver_cls = cls.STRATEGIES.get(strategy)
        if resolver_cls is None:
            raise ValueError(
                f"Unknown keyword match strategy '{strategy}'. "
                f"Choose from: {list(cls.STRATEGIES)}"
            )
        return resolver_cls(registry)
