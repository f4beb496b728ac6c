"""Tests for two-pass keyword matching."""

import pytest

from marker_engine.matching.resolver import KeywordResolver, MostSpecificKeywordResolver
from marker_engine.registry.default import DEFAULT_REGISTRY
from marker_engine.registry.models import AnatomicalMarkerType, Position
from marker_engine.registry.registry import MarkerTypeRegistry


def _marker(marker_type: str, *keywords: str) -> AnatomicalMarkerType:
    return AnatomicalMarkerType(
        type=marker_type,
        display_name=marker_type.replace("_", " ").title(),
        category="moderate",
        default_body_region="chest",
        default_body_view="front",
        default_position=Position(50, 30),
        keywords=keywords,
    )


@pytest.fixture()
def overlapping_registry() -> MarkerTypeRegistry:
    """Two families whose keywords overlap: 'line' is inside 'central line'."""
    return MarkerTypeRegistry(
        [
            ("generic", [_marker("generic_line", "line")]),
            ("specific", [_marker("central_line", "central line", "cvc")]),
        ]
    )


class TestEmptyInput:
    def test_empty_string(self, registry: MarkerTypeRegistry) -> None:
        assert KeywordResolver(registry).resolve("") is None

    def test_whitespace_only(self, registry: MarkerTypeRegistry) -> None:
        assert KeywordResolver(registry).resolve("   \t\n") is None

    def test_no_match(self, registry: MarkerTypeRegistry) -> None:
        assert KeywordResolver(registry).resolve("Patient ate breakfast and walked") is None


class TestBundledCatalog:
    def test_picc_line_in_sentence(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("Patient has a PICC line in the right arm")
        assert result is not None
        assert result.type == "picc_line"

    def test_exact_keyword_is_case_insensitive(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("  FOLEY ")
        assert result is not None
        assert result.type == "foley_catheter"

    def test_exact_match_beats_earlier_substring(self, registry: MarkerTypeRegistry) -> None:
        # "seizure" (neurological) precedes "seizure precautions" in registry
        # order, but the exact pass runs first.
        result = KeywordResolver(registry).resolve("Seizure precautions")
        assert result is not None
        assert result.type == "seizure_precautions"

    def test_substring_pass_is_first_match(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("patient on seizure precautions")
        assert result is not None
        assert result.type == "seizure_disorder"

    def test_combined_code_status_before_dnr(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("Patient is DNR/DNI per family")
        assert result is not None
        assert result.type == "dnr_dni"

    def test_bare_dnr(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("Confirmed DNR with daughter")
        assert result is not None
        assert result.type == "dnr"

    def test_latex_allergy_before_generic_allergy(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("Latex allergy noted on admission")
        assert result is not None
        assert result.type == "latex_allergy"

    def test_cvad_is_central_line(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("CVAD flushed without difficulty")
        assert result is not None
        assert result.type == "central_line"

    def test_typographic_apostrophe(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("History of Crohn’s disease")
        assert result is not None
        assert result.type == "inflammatory_bowel_disease"

    def test_status_badge_type_resolves(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("High fall risk")
        assert result is not None
        assert result.type == "fall_risk"
        assert result.is_status_badge is True

    def test_deterministic(self, registry: MarkerTypeRegistry) -> None:
        resolver = KeywordResolver(registry)
        text = "Chest tube to suction, JP drain right side"
        first = resolver.resolve(text)
        assert first is not None
        assert all(resolver.resolve(text) is first for _ in range(5))


class TestOrderContract:
    def test_exact_match_wins(self, overlapping_registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(overlapping_registry).resolve("Central Line")
        assert result is not None
        assert result.type == "central_line"

    def test_earlier_family_wins_substring(
        self, overlapping_registry: MarkerTypeRegistry
    ) -> None:
        result = KeywordResolver(overlapping_registry).resolve("central line placed today")
        assert result is not None
        assert result.type == "generic_line"

    def test_later_keyword_used_when_earlier_absent(
        self, overlapping_registry: MarkerTypeRegistry
    ) -> None:
        result = KeywordResolver(overlapping_registry).resolve("new cvc in place")
        assert result is not None
        assert result.type == "central_line"


class TestMostSpecificResolver:
    def test_longest_keyword_wins_substring(
        self, overlapping_registry: MarkerTypeRegistry
    ) -> None:
        result = MostSpecificKeywordResolver(overlapping_registry).resolve(
            "central line placed today"
        )
        assert result is not None
        assert result.type == "central_line"

    def test_exact_pass_unchanged(self, overlapping_registry: MarkerTypeRegistry) -> None:
        result = MostSpecificKeywordResolver(overlapping_registry).resolve("line")
        assert result is not None
        assert result.type == "generic_line"

    def test_equal_length_tie_goes_to_earlier(self) -> None:
        registry = MarkerTypeRegistry(
            [
                ("first", [_marker("alpha", "abcd")]),
                ("second", [_marker("beta", "wxyz")]),
            ]
        )
        result = MostSpecificKeywordResolver(registry).resolve("wxyz then abcd")
        assert result is not None
        assert result.type == "alpha"

    def test_seizure_precautions_in_sentence(self, registry: MarkerTypeRegistry) -> None:
        result = MostSpecificKeywordResolver(registry).resolve(
            "patient on seizure precautions"
        )
        assert result is not None
        assert result.type == "seizure_precautions"

    def test_no_match(self, registry: MarkerTypeRegistry) -> None:
        assert MostSpecificKeywordResolver(registry).resolve("") is None


# Catalog keywords that are shadowed on purpose by an earlier, shorter keyword
# under first-match-wins: "seizure" (seizure_disorder) precedes the badge.
_SHADOWED_IN_SENTENCE = {
    ("seizure precautions", "seizure_disorder"),
    ("seizure pads", "seizure_disorder"),
}


@pytest.mark.parametrize(
    ("keyword", "marker_type"),
    [(keyword, definition.type) for keyword, definition in DEFAULT_REGISTRY.keyword_index()],
)
def test_keyword_in_sentence_resolves_to_own_type(keyword: str, marker_type: str) -> None:
    result = KeywordResolver(DEFAULT_REGISTRY).resolve(f"Noted {keyword} today")
    assert result is not None
    if (keyword, result.type) in _SHADOWED_IN_SENTENCE:
        return
    assert result.type == marker_type


class TestWordInteriorKeywords:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Patient intubated with endotracheal tube", "endotracheal_tube"),
            ("Exposure to chickenpox", "airborne_isolation"),
            ("Trach collar at 28%", "tracheostomy"),
            ("Strict NPO after midnight", "aspiration_precautions"),
        ],
    )
    def test_resolves_to_intended_type(
        self, registry: MarkerTypeRegistry, text: str, expected: str
    ) -> None:
        result = KeywordResolver(registry).resolve(text)
        assert result is not None
        assert result.type == expected

    def test_spacer_is_not_a_pacemaker(self, registry: MarkerTypeRegistry) -> None:
        result = KeywordResolver(registry).resolve("antibiotic spacer in left knee")
        assert result is None or result.type != "pacemaker"
