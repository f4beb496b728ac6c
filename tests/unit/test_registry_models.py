"""Tests for marker type definition models."""

import dataclasses

import pytest

from marker_engine.registry.models import (
    AnatomicalMarkerType,
    Lateralizable,
    Midline,
    Position,
    StatusBadgeType,
)


def _anatomical(**overrides: object) -> AnatomicalMarkerType:
    fields: dict[str, object] = {
        "type": "picc_line",
        "display_name": "PICC Line",
        "category": "moderate",
        "default_body_region": "upper_arm",
        "default_body_view": "front",
        "default_position": Position(22, 35),
        "keywords": ("picc line",),
    }
    fields.update(overrides)
    return AnatomicalMarkerType(**fields)  # type: ignore[arg-type]


class TestAnatomicalMarkerType:
    def test_defaults_to_midline(self) -> None:
        definition = _anatomical()
        assert isinstance(definition.laterality, Midline)

    def test_is_not_status_badge(self) -> None:
        assert _anatomical().is_status_badge is False
        assert AnatomicalMarkerType.is_status_badge is False

    def test_icd10_is_optional(self) -> None:
        assert _anatomical().icd10 is None

    def test_frozen(self) -> None:
        definition = _anatomical()
        with pytest.raises(dataclasses.FrozenInstanceError):
            definition.type = "other"  # type: ignore[misc]

    def test_lateralizable_requires_both_sides(self) -> None:
        with pytest.raises(TypeError):
            Lateralizable(left=Position(78, 35))  # type: ignore[call-arg]


class TestStatusBadgeType:
    def test_is_status_badge(self) -> None:
        badge = StatusBadgeType(
            type="dnr",
            display_name="DNR",
            category="critical",
            default_body_region="status_ring",
            default_body_view="front",
            default_position=Position(50, 1),
            keywords=("dnr",),
            badge_color="#991B1B",
            badge_icon="heart-off",
        )
        assert badge.is_status_badge is True
        assert badge.badge_color == "#991B1B"
        assert not hasattr(badge, "laterality")

    def test_requires_badge_style(self) -> None:
        with pytest.raises(TypeError):
            StatusBadgeType(  # type: ignore[call-arg]
                type="dnr",
                display_name="DNR",
                category="critical",
                default_body_region="status_ring",
                default_body_view="front",
                default_position=Position(50, 1),
                keywords=("dnr",),
            )
