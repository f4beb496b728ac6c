import unicodedata
from typing import ClassVar

import icu  # type: ignore[import-untyped]


class TextNormalizer:
    """Folds dictated text into the keyword space of the catalog.

    NFC-normalizes, transliterates to lowercase ASCII (so typographic quotes
    and accented letters become their plain equivalents), trims and collapses
    all runs of whitespace to a single space.
    """

    _ICU_TRANSFORM: ClassVar[str] = "Any-Latin; Latin-ASCII; Lower"

    def __init__(self) -> None:
        self._transliterator: icu.Transliterator = icu.Transliterator.createInstance(
            self._ICU_TRANSFORM
        )

    def normalize(self, text: str) -> str:
        if not text or not text.strip():
            return ""
        folded = self._transliterator.transliterate(unicodedata.normalize("NFC", text))
        return " ".join(folded.split())
