import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from sponsorblock.categories import Category, convert_to_category
from sponsorblock.errors import (
    DeserializationError,
    HttpApiError,
    HttpClientError,
    HttpUnknownError,
)
from sponsorblock.util import (
    bool_from_integer,
    bytes_to_hex_string,
    datetime_from_millis_timestamp,
    duration_from_millis,
    duration_from_seconds,
    map_keys,
    none_on_zero,
    response_text,
    to_url_array,
    to_url_array_conditional,
    to_url_array_conditional_convert,
)


def test_response_text_success():
    response = httpx.Response(200, text="segment data")
    assert response_text(response) == "segment data"


@pytest.mark.parametrize(
    ("status", "error"),
    [(500, HttpApiError), (503, HttpApiError), (404, HttpClientError),
     (400, HttpClientError), (302, HttpUnknownError)],
)
def test_response_text_errors(status, error):
    with pytest.raises(error) as info:
        response_text(httpx.Response(status, text="ignored"))
    assert info.value.status == status


def test_to_url_array_format():
    assert to_url_array(["a", "b"]) == '["a","b"]'


def test_to_url_array_empty():
    assert to_url_array([]) == "[]"


def test_to_url_array_round_trips_through_json():
    items = ["one", "two", "three"]
    assert json.loads(to_url_array(items)) == items


def test_to_url_array_conditional_filters():
    items = ["keep", "drop", "keep-too"]
    result = to_url_array_conditional(items, lambda s: s.startswith("keep"))
    assert json.loads(result) == ["keep", "keep-too"]


def test_to_url_array_conditional_convert():
    pairs = [(1, "x"), (2, "y"), (3, "z")]
    result = to_url_array_conditional_convert(pairs, lambda p: p[0] != 2, lambda p: p[1])
    assert json.loads(result) == ["x", "z"]


def test_bytes_to_hex_string_round_trip():
    data = bytes(range(256))
    text = bytes_to_hex_string(data)
    assert len(text) == 2 * len(data)
    assert text == text.lower()
    assert bytes.fromhex(text) == data


def test_bool_from_integer():
    assert bool_from_integer(0) is False
    assert bool_from_integer(1) is True
    assert bool_from_integer(-7) is True


@pytest.mark.parametrize("value", ["1", 1.0, True, None])
def test_bool_from_integer_rejects_non_integers(value):
    with pytest.raises(DeserializationError):
        bool_from_integer(value)


def test_none_on_zero():
    assert none_on_zero(0.0) is None
    assert none_on_zero(0) is None
    assert none_on_zero(123.5) == 123.5


def test_none_on_zero_rejects_strings():
    with pytest.raises(DeserializationError):
        none_on_zero("0")


def test_map_keys_drops_unknown():
    result = map_keys({"sponsor": 3, "bogus": 4, "filler": 5}, convert_to_category)
    assert result == {Category.SPONSOR: 3, Category.FILLER_TANGENT: 5}


def test_map_keys_requires_mapping():
    with pytest.raises(DeserializationError):
        map_keys(["sponsor"], convert_to_category)


def test_duration_from_millis():
    assert duration_from_millis(1500) == timedelta(milliseconds=1500)


def test_duration_from_seconds():
    assert duration_from_seconds(2.5) == timedelta(seconds=2.5)
    assert duration_from_seconds(7) == timedelta(seconds=7)


def test_datetime_from_millis_timestamp_epoch():
    assert datetime_from_millis_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_datetime_from_millis_timestamp_round_trip():
    millis = 1_640_995_200_123
    result = datetime_from_millis_timestamp(millis)
    assert result.tzinfo is not None
    assert round(result.timestamp() * 1000) == millis


def test_datetime_from_millis_timestamp_out_of_range():
    with pytest.raises(DeserializationError):
        datetime_from_millis_timestamp(10**20)