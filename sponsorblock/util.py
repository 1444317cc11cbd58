"""Helpers for responses, query values and decoding API fields."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

import httpx

from .errors import (
    DeserializationError,
    HttpApiError,
    HttpClientError,
    HttpCommunicationError,
    HttpUnknownError,
    SponsorBlockError,
)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def response_text(response: httpx.Response) -> str:
    """Return the body of a successful response, or raise by status class."""
    status = response.status_code
    if response.is_success:
        try:
            response.read()
        except httpx.HTTPError as exc:
            raise HttpCommunicationError() from exc
        return response.text
    if response.is_server_error:
        raise HttpApiError(status)
    if response.is_client_error:
        raise HttpClientError(status)
    raise HttpUnknownError(status)


def to_url_array(items: Iterable[str]) -> str:
    """Format strings as the bracketed, quoted array the API expects."""
    return to_url_array_conditional(items, lambda _item: True)


def to_url_array_conditional(items: Iterable[str], predicate: Callable[[str], bool]) -> str:
    """Like :func:`to_url_array`, keeping only items that satisfy ``predicate``."""
    return to_url_array_conditional_convert(items, predicate, lambda item: item)


def to_url_array_conditional_convert(
    items: Iterable[T],
    predicate: Callable[[T], bool],
    convert: Callable[[T], str],
) -> str:
    """Format the converted form of every item passing ``predicate`` as an API array."""
    selected = (convert(item) for item in items if predicate(item))
    return "[" + ",".join(f'"{value}"' for value in selected) + "]"


def bytes_to_hex_string(data: bytes) -> str:
    """Return the lower-case hexadecimal form of ``data``."""
    return bytes(data).hex()


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DeserializationError(f"expected an integer, got {value!r}")
    return value


def _require_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DeserializationError(f"expected a number, got {value!r}")
    return float(value)


def bool_from_integer(value: Any) -> bool:
    """Decode an integer flag: anything other than 0 is true."""
    return _require_int(value) != 0


def none_on_zero(value: Any) -> float | None:
    """Decode a number, treating 0.0 as absent."""
    number = _require_number(value)
    return None if number == 0.0 else number


def map_keys(mapping: Any, convert: Callable[[str], K]) -> dict[K, V]:
    """Convert the keys of a mapping, silently dropping keys that fail to convert."""
    if not isinstance(mapping, Mapping):
        raise DeserializationError(f"expected an object, got {mapping!r}")
    result: dict[K, V] = {}
    for key, value in mapping.items():
        try:
            result[convert(key)] = value
        except (SponsorBlockError, ValueError):
            continue
    return result


def duration_from_millis(value: Any) -> timedelta:
    """Decode an integer number of milliseconds into a duration."""
    millis = _require_int(value)
    try:
        return timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise DeserializationError(f"duration out of range: {millis}") from exc


def duration_from_seconds(value: Any) -> timedelta:
    """Decode a (possibly fractional) number of seconds into a duration."""
    seconds = _require_number(value)
    try:
        return timedelta(seconds=seconds)
    except (OverflowError, ValueError) as exc:
        raise DeserializationError(f"duration out of range: {seconds}") from exc


def datetime_from_millis_timestamp(value: Any) -> datetime:
    """Decode a Unix timestamp in milliseconds into an aware UTC datetime."""
    millis = _require_int(value)
    try:
        return _EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise DeserializationError(f"timestamp out of range: {millis}") from exc