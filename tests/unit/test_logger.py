import logging
from datetime import datetime, timezone

import pytest

from marker_engine.logging.logger import Log
from marker_engine.ranking.models import MarkerInstance
from marker_engine.ranking.ranker import PriorityRanker
from marker_engine.registry.registry import MarkerTypeRegistry


class TestLog:
    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        try:
            assert logging.getLogger("marker_engine").level == logging.DEBUG
        finally:
            Log.configure("INFO")

    def test_configure_adds_single_handler(self) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(logging.getLogger("marker_engine").handlers) == 1

    def test_kwargs_become_record_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="marker_engine"):
            Log.info("catalog loaded", type_count=3)
        assert caplog.records[-1].type_count == 3

    def test_registry_build_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="marker_engine"):
            MarkerTypeRegistry([])
        record = caplog.records[-1]
        assert "registry built" in record.getMessage()
        assert (record.type_count, record.family_count) == (0, 0)

    def test_unknown_type_warning_carries_marker_fields(
        self, registry: MarkerTypeRegistry, now: datetime, caplog: pytest.LogCaptureFixture
    ) -> None:
        instance = MarkerInstance(
            id="m-9",
            marker_type="retired_marker",
            category="moderate",
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )
        with caplog.at_level(logging.WARNING, logger="marker_engine"):
            PriorityRanker(registry).rank([instance], 5, True, now)
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert (record.marker_id, record.marker_type) == ("m-9", "retired_marker")
