from marker_engine.matching.base import BaseKeywordResolver
from marker_engine.matching.factory import KeywordResolverFactory
from marker_engine.matching.resolver import KeywordResolver, MostSpecificKeywordResolver

__all__ = [
    "BaseKeywordResolver",
    "KeywordResolver",
    "KeywordResolverFactory",
    "MostSpecificKeywordResolver",
]
