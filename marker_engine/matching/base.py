from abc import ABC, abstractmethod

from marker_engine.registry.models import MarkerTypeDefinition


class BaseKeywordResolver(ABC):
    """Contract for all free-text to marker type resolvers."""

    @abstractmethod
    def resolve(self, text: str) -> MarkerTypeDefinition | None:
        """Return the marker type best matching *text*.

        Args:
            text: A phrase or sentence from the transcription service.

        Returns:
            The matching definition, or None when nothing matches. A miss is
            a normal outcome and never raises.
        """
