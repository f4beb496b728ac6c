"""Builds MarkerInstance snapshots from raw record store rows."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from marker_engine.ranking.exceptions import MarkerInstanceValidationError
from marker_engine.ranking.models import (
    VALID_LATERALITIES,
    VALID_STATUSES,
    MarkerDetails,
    MarkerInstance,
)
from marker_engine.registry.models import VALID_BODY_VIEWS, BodyView


def build_instances(rows: Iterable[dict[str, Any]]) -> list[MarkerInstance]:
    """Build one MarkerInstance per row, preserving row order."""
    return [build_instance(row, index) for index, row in enumerate(rows)]


def build_instance(row: dict[str, Any], index: int = 0) -> MarkerInstance:
    """Validate a raw row and build a MarkerInstance.

    Raises:
        MarkerInstanceValidationError: on any validation failure.
    """
    if not isinstance(row, dict):
        raise MarkerInstanceValidationError(f"Marker at index {index} must be an object")
    return MarkerInstance(
        id=_require_str(row, "id", index),
        marker_type=_require_str(row, "marker_type", index),
        category=_require_str(row, "category", index),
        created_at=_build_created_at(row.get("created_at"), index),
        laterality=_build_choice(row, "laterality", "none", VALID_LATERALITIES, index),
        status=_build_choice(row, "status", "confirmed", VALID_STATUSES, index),
        is_active=_build_bool(row, "is_active", True, index),
        requires_attention=_build_bool(row, "requires_attention", False, index),
        body_view=_build_body_view(row.get("body_view"), index),
        details=_build_details(row.get("details"), index),
    )


def _require_str(row: dict[str, Any], name: str, index: int) -> str:
    value = row.get(name)
    if not value or not isinstance(value, str):
        raise MarkerInstanceValidationError(
            f"Marker at index {index}: '{name}' must be a non-empty string"
        )
    return value


def _build_created_at(raw: Any, index: int) -> datetime:
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str):
        try:
            # Record store timestamps may use a trailing Z for UTC.
            return datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError as exc:
            raise MarkerInstanceValidationError(
                f"Marker at index {index}: 'created_at' is not an ISO-8601 timestamp"
            ) from exc
    raise MarkerInstanceValidationError(
        f"Marker at index {index}: 'created_at' must be a datetime or ISO-8601 string"
    )


def _build_choice(
    row: dict[str, Any],
    name: str,
    default: str,
    choices: frozenset[str],
    index: int,
) -> Any:
    value = row.get(name)
    if value is None:
        return default
    if value not in choices:
        raise MarkerInstanceValidationError(
            f"Marker at index {index}: '{name}' must be one of "
            f"{sorted(choices)}, got {value!r}"
        )
    return value


def _build_bool(row: dict[str, Any], name: str, default: bool, index: int) -> bool:
    value = row.get(name)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise MarkerInstanceValidationError(
            f"Marker at index {index}: '{name}' must be a boolean"
        )
    return value


def _build_body_view(raw: Any, index: int) -> BodyView | None:
    if raw is None:
        return None
    if raw not in VALID_BODY_VIEWS:
        raise MarkerInstanceValidationError(
            f"Marker at index {index}: 'body_view' must be one of "
            f"{sorted(VALID_BODY_VIEWS)} or null, got {raw!r}"
        )
    return raw


def _build_details(raw: Any, index: int) -> MarkerDetails:
    if raw is None:
        return MarkerDetails()
    if not isinstance(raw, dict):
        raise MarkerInstanceValidationError(
            f"Marker at index {index}: 'details' must be an object or null"
        )
    watch = raw.get("complications_watch")
    if watch is None:
        return MarkerDetails()
    if not isinstance(watch, list) or not all(isinstance(item, str) for item in watch):
        raise MarkerInstanceValidationError(
            f"Marker at index {index}: 'details.complications_watch' must be a list of strings"
        )
    return MarkerDetails(complications_watch=list(watch))
