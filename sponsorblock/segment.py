"""Video segments and decoding of segment data received from the API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Protocol, TypeVar

from .categories import Action, ActionKind, Category, convert_to_action_kind, convert_to_category
from .errors import BadDataError, DeserializationError
from .util import bool_from_integer, datetime_from_millis_timestamp, none_on_zero

T = TypeVar("T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DeserializationError(f"expected an object, got {data!r}")
    return data


def _get(data: Mapping[str, Any], key: str, decode: Callable[[Any], T], default: T) -> T:
    if key not in data:
        return default
    return decode(data[key])


def _optional(decode: Callable[[Any], T]) -> Callable[[Any], T | None]:
    return lambda value: None if value is None else decode(value)


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise DeserializationError(f"expected a string, got {value!r}")
    return value


def _integer(value: Any, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise DeserializationError(f"expected an integer in [{low}, {high}], got {value!r}")
    return value


def _uint(value: Any) -> int:
    return _integer(value, 0, _U32_MAX)


def _int32(value: Any) -> int:
    return _integer(value, _I32_MIN, _I32_MAX)


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DeserializationError(f"expected a number, got {value!r}")
    return float(value)


def _time_points(value: Any) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise DeserializationError(f"expected an array of two numbers, got {value!r}")
    start, end = value
    return _number(start), _number(end)


def _category(value: Any) -> Category:
    return convert_to_category(_string(value))


def _action_kind(value: Any) -> ActionKind:
    return convert_to_action_kind(_string(value))


def _fmt(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


@dataclass
class AdditionalSegmentInfo:
    """Segment information that only some API calls provide."""

    video_id: str = ""
    incorrect_votes: int = 0
    submitter_id: str = ""
    time_submitted: datetime = _EPOCH
    views: int = 0
    service: str = ""
    hidden: bool = False
    submitter_reputation: float = 0.0
    shadow_banned: bool = False
    submitter_user_agent: str = ""


class _SegmentInfoSource(Protocol):
    def fetch_segment_info(self, segment_uuid: str) -> Segment: ...


@dataclass
class Segment:
    """A section or point in a video worth skipping or treating specially."""

    category: Category
    action: Action
    uuid: str
    locked: bool
    votes: int
    video_duration_on_submission: float | None = None
    additional_info: AdditionalSegmentInfo | None = None

    def fetch_additional_info(self, client: _SegmentInfoSource) -> bool:
        """Fill in ``additional_info`` from the API if it is missing.

        Returns whether a request had to be made.
        """
        if self.additional_info is not None:
            return False
        self.additional_info = client.fetch_segment_info(self.uuid).additional_info
        return True


def parse_additional_info(data: Any) -> AdditionalSegmentInfo:
    """Decode the additional segment fields of an API object."""
    fields = _mapping(data)
    return AdditionalSegmentInfo(
        video_id=_get(fields, "videoID", _string, ""),
        incorrect_votes=_get(fields, "incorrectVotes", _uint, 0),
        submitter_id=_get(fields, "userID", _string, ""),
        time_submitted=_get(fields, "timeSubmitted", datetime_from_millis_timestamp, _EPOCH),
        views=_get(fields, "views", _uint, 0),
        service=_get(fields, "service", _string, ""),
        hidden=_get(fields, "hidden", bool_from_integer, False),
        submitter_reputation=_get(fields, "submitterReputation", _number, 0.0),
        shadow_banned=_get(fields, "shadowBanned", bool_from_integer, False),
        submitter_user_agent=_get(fields, "submitterUserAgent", _string, ""),
    )


def parse_segment(data: Any, additional_info: bool = False) -> Segment:
    """Decode and verify a segment object received from the API.

    ``additional_info`` selects whether the additional fields are kept.
    """
    fields = _mapping(data)
    category = _get(fields, "category", _category, Category.SPONSOR)
    action_kind = _get(fields, "actionType", _action_kind, ActionKind.SKIP)
    time_points = _get(fields, "segment", _optional(_time_points), None)
    start_time = _get(fields, "startTime", _optional(_number), None)
    end_time = _get(fields, "endTime", _optional(_number), None)
    uuid = _get(fields, "UUID", _string, "")
    locked = _get(fields, "locked", bool_from_integer, False)
    votes = _get(fields, "votes", _int32, 0)
    duration = _get(fields, "videoDuration", none_on_zero, None)
    extra = parse_additional_info(fields)

    if time_points is None:
        if start_time is None:
            raise BadDataError("time points and start time are both missing")
        if end_time is None:
            raise BadDataError("time points and end time are both missing")
        time_points = (start_time, end_time)
    start, end = time_points
    if start > end:
        raise BadDataError(f"segment start ({_fmt(start)}) > end ({_fmt(end)})")
    if start < 0.0:
        raise BadDataError(f"segment start ({_fmt(start)}) < 0")
    if end < 0.0:
        raise BadDataError(f"segment end ({_fmt(end)}) < 0")
    if duration is not None and duration < 0.0:
        raise BadDataError(f"video duration upon submission ({_fmt(duration)}) < 0")

    # The API reports highlights as skips unless "poi" was requested.
    if category is Category.HIGHLIGHT:
        action_kind = ActionKind.POINT_OF_INTEREST

    return Segment(
        category=category,
        action=action_kind.to_action(time_points),
        uuid=uuid,
        locked=locked,
        votes=votes,
        video_duration_on_submission=duration,
        additional_info=extra if additional_info else None,
    )