"""API status, user information and user statistics."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

from .categories import ActionKind, Category, convert_to_action_kind, convert_to_category
from .errors import BadDataError, DeserializationError
from .util import (
    datetime_from_millis_timestamp,
    duration_from_millis,
    duration_from_seconds,
    map_keys,
)

T = TypeVar("T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_U32_MAX = 2**32 - 1


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DeserializationError(f"expected an object, got {data!r}")
    return data


def _get(data: Mapping[str, Any], key: str, decode: Callable[[Any], T], default: T) -> T:
    if key not in data:
        return default
    return decode(data[key])


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise DeserializationError(f"expected a string, got {value!r}")
    return value


def _optional_string(value: Any) -> str | None:
    return None if value is None else _string(value)


def _uint(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise DeserializationError(f"expected an unsigned 32-bit integer, got {value!r}")
    return value


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DeserializationError(f"expected a number, got {value!r}")
    return float(value)


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise DeserializationError(f"expected a boolean, got {value!r}")
    return value


def _load_average(value: Any) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise DeserializationError(f"expected an array of two numbers, got {value!r}")
    five, fifteen = value
    return _number(five), _number(fifteen)


def _count_map(convert: Callable[[str], T]) -> Callable[[Any], dict[T, int]]:
    def decode(value: Any) -> dict[T, int]:
        raw = _mapping(value)
        counts = {key: _uint(count) for key, count in raw.items()}
        return map_keys(counts, convert)

    return decode


def _visible_user_name(fields: Mapping[str, Any], user_id: str) -> str | None:
    # The API reports the public user ID as the name when none is set.
    user_name = _get(fields, "userName", _optional_string, None)
    if user_name is None:
        raise BadDataError("userName field was not set")
    return None if user_name == user_id else user_name


@dataclass
class ApiStatus:
    """The status reported by the API server."""

    uptime: timedelta = timedelta()
    commit: str = ""
    db_version: int = 0
    request_start_time: datetime = _EPOCH
    request_time_taken: timedelta = timedelta()
    load_average: tuple[float, float] = (0.0, 0.0)


@dataclass
class UserInfo:
    """Information about a user."""

    public_user_id: str = ""
    user_name: str | None = None
    minutes_saved: float = 0.0
    segment_count: int = 0
    ignored_segment_count: int = 0
    view_count: int = 0
    ignored_view_count: int = 0
    warnings: int = 0
    reputation: float = 0.0
    vip: bool = False
    last_segment_id: str | None = None

    def total_segment_count(self) -> int:
        """Segments submitted, including ignored and hidden ones."""
        return self.segment_count + self.ignored_segment_count

    def total_view_count(self) -> int:
        """Views on the user's segments, including ignored and hidden ones."""
        return self.view_count + self.ignored_view_count


@dataclass
class OverallStats:
    """The overall statistics of a user."""

    minutes_saved: float = 0.0
    segment_count: int = 0


@dataclass
class UserStats:
    """Statistics about a user's submissions."""

    user_id: str = ""
    user_name: str | None = None
    overall_stats: OverallStats = field(default_factory=OverallStats)
    category_count: dict[Category, int] = field(default_factory=dict)
    action_type_count: dict[ActionKind, int] = field(default_factory=dict)


def parse_api_status(data: Any) -> ApiStatus:
    """Decode an API status object."""
    fields = _mapping(data)
    return ApiStatus(
        uptime=_get(fields, "uptime", duration_from_seconds, timedelta()),
        commit=_get(fields, "commit", _string, ""),
        db_version=_get(fields, "db", _uint, 0),
        request_start_time=_get(fields, "startTime", datetime_from_millis_timestamp, _EPOCH),
        request_time_taken=_get(fields, "processTime", duration_from_millis, timedelta()),
        load_average=_get(fields, "loadavg", _load_average, (0.0, 0.0)),
    )


def parse_user_info(data: Any) -> UserInfo:
    """Decode a user info object; a user name equal to the user ID becomes ``None``."""
    fields = _mapping(data)
    public_user_id = _get(fields, "userID", _string, "")
    return UserInfo(
        public_user_id=public_user_id,
        user_name=_visible_user_name(fields, public_user_id),
        minutes_saved=_get(fields, "minutesSaved", _number, 0.0),
        segment_count=_get(fields, "segmentCount", _uint, 0),
        ignored_segment_count=_get(fields, "ignoredSegmentCount", _uint, 0),
        view_count=_get(fields, "viewCount", _uint, 0),
        ignored_view_count=_get(fields, "ignoredViewCount", _uint, 0),
        warnings=_get(fields, "warnings", _uint, 0),
        reputation=_get(fields, "reputation", _number, 0.0),
        vip=_get(fields, "vip", _boolean, False),
        last_segment_id=_get(fields, "lastSegmentID", _optional_string, None),
    )


def _parse_overall_stats(data: Any) -> OverallStats:
    fields = _mapping(data)
    return OverallStats(
        minutes_saved=_get(fields, "minutesSaved", _number, 0.0),
        segment_count=_get(fields, "segmentCount", _uint, 0),
    )


def parse_user_stats(data: Any) -> UserStats:
    """Decode a user stats object; unknown category and action names are dropped."""
    fields = _mapping(data)
    user_id = _get(fields, "userID", _string, "")
    return UserStats(
        user_id=user_id,
        user_name=_visible_user_name(fields, user_id),
        overall_stats=_get(fields, "overallStats", _parse_overall_stats, OverallStats()),
        category_count=_get(fields, "categoryCount", _count_map(convert_to_category), {}),
        action_type_count=_get(
            fields, "actionTypeCount", _count_map(convert_to_action_kind), {}
        ),
    )