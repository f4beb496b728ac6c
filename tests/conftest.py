from datetime import datetime, timezone

import pytest

from marker_engine.registry.default import DEFAULT_REGISTRY
from marker_engine.registry.registry import MarkerTypeRegistry


@pytest.fixture()
def registry() -> MarkerTypeRegistry:
    """The bundled catalog registry."""
    return DEFAULT_REGISTRY


@pytest.fixture()
def now() -> datetime:
    """Fixed reference time for recency calculations."""
    return datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
