"""The client for talking to a SponsorBlock API server."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Mapping, Sequence
from datetime import timedelta
from typing import Any

import httpx

from .categories import AcceptedActions, AcceptedCategories, actions_to_url, categories_to_url
from .errors import (
    BadDataError,
    DeserializationError,
    HttpCommunicationError,
    NoMatchingVideoHashError,
)
from .segment import Segment, parse_segment
from .stats import (
    ApiStatus,
    UserInfo,
    UserStats,
    parse_api_status,
    parse_user_info,
    parse_user_stats,
)
from .util import bytes_to_hex_string, response_text, to_url_array

BASE_URL_MAIN = "https://sponsor.ajay.app/api"
BASE_URL_TESTING = "https://sponsor.ajay.app/test/api"
DEFAULT_HASH_PREFIX_LENGTH = 4
DEFAULT_SERVICE = "YouTube"
DEFAULT_USER_AGENT = "sponsorblock/0.6.1"
DEFAULT_TIMEOUT = timedelta(seconds=5)

_Params = list[tuple[str, str]]


def _timeout_seconds(timeout: float | timedelta | None) -> float | None:
    if timeout is None:
        return None
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
    if seconds <= 0:
        raise ValueError(f"timeout must be positive, got {seconds}")
    return seconds


def _segment_list(data: Any) -> list[Any]:
    if not isinstance(data, list):
        raise DeserializationError(f"expected an array, got {data!r}")
    return data


class Client:
    """A synchronous client for the SponsorBlock API."""

    BASE_URL_MAIN = BASE_URL_MAIN
    BASE_URL_TESTING = BASE_URL_TESTING
    DEFAULT_HASH_PREFIX_LENGTH = DEFAULT_HASH_PREFIX_LENGTH
    DEFAULT_SERVICE = DEFAULT_SERVICE
    DEFAULT_USER_AGENT = DEFAULT_USER_AGENT
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        user_id: str,
        *,
        base_url: str = BASE_URL_MAIN,
        hash_prefix_length: int = DEFAULT_HASH_PREFIX_LENGTH,
        service: str = DEFAULT_SERVICE,
        timeout: float | timedelta | None = DEFAULT_TIMEOUT,
        private_searches: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not 4 <= hash_prefix_length <= 32:
            raise ValueError(
                f"hash_prefix_length must be between 4 and 32, got {hash_prefix_length}"
            )
        seconds = _timeout_seconds(timeout)
        self.user_id = user_id
        self.base_url = base_url.rstrip("/")
        self.hash_prefix_length = hash_prefix_length
        self.service = service
        self.private_searches = private_searches
        self._http = httpx.Client(
            headers={"User-Agent": DEFAULT_USER_AGENT},
            timeout=httpx.Timeout(seconds),
            transport=transport,
        )

    def close(self) -> None:
        """Release the underlying HTTP connections."""
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _get_json(self, path: str, params: _Params | None = None) -> Any:
        try:
            response = self._http.get(f"{self.base_url}{path}", params=params or [])
        except httpx.HTTPError as exc:
            raise HttpCommunicationError() from exc
        text = response_text(response)
        try:
            return json.loads(text)
        except ValueError as exc:
            raise DeserializationError(str(exc)) from exc

    def fetch_api_status(self) -> ApiStatus:
        """Fetch the status of the API server."""
        return parse_api_status(self._get_json("/status"))

    def fetch_segments(
        self,
        video_id: str,
        accepted_categories: AcceptedCategories = AcceptedCategories.ALL,
        accepted_actions: AcceptedActions = AcceptedActions.ALL,
        required_segments: Iterable[str] = (),
    ) -> list[Segment]:
        """Fetch the segments of a video, without additional segment info.

        ``required_segments`` names segment UUIDs to return even if they fall
        below the vote threshold. Raises :class:`HttpClientError` (404) or
        :class:`NoMatchingVideoHashError` when nothing is known for the video.
        """
        required = list(required_segments)
        params: _Params = []
        path = "/skipSegments"
        if self.private_searches:
            digest = hashlib.sha256(video_id.encode("utf-8")).digest()
            path = f"{path}/{bytes_to_hex_string(digest)[: self.hash_prefix_length]}"
        else:
            params.append(("videoID", video_id))
        params.append(("categories", categories_to_url(accepted_categories)))
        params.append(("actionTypes", actions_to_url(accepted_actions)))
        params.append(("service", self.service))
        if required:
            params.append(("requiredSegments", to_url_array(required)))

        data = self._get_json(path, params)
        if self.private_searches:
            raw_segments = self._matching_segments(data, video_id)
        else:
            raw_segments = _segment_list(data)
        return [parse_segment(raw, False) for raw in raw_segments]

    @staticmethod
    def _matching_segments(data: Any, video_id: str) -> list[Any]:
        for hash_match in _segment_list(data):
            if not isinstance(hash_match, Mapping):
                raise DeserializationError(f"expected an object, got {hash_match!r}")
            if hash_match.get("videoID", "") == video_id:
                return _segment_list(hash_match.get("segments", []))
        raise NoMatchingVideoHashError()

    def fetch_segment_info(self, segment_uuid: str) -> Segment:
        """Fetch a segment with its additional info."""
        segments = self.fetch_segment_info_multiple([segment_uuid])
        if not segments:
            raise BadDataError("no segments found")
        return segments[-1]

    def fetch_segment_info_multiple(self, segment_uuids: Sequence[str]) -> list[Segment]:
        """Fetch several segments with their additional info."""
        data = self._get_json("/segmentInfo", [("UUIDs", to_url_array(segment_uuids))])
        return [parse_segment(raw, True) for raw in _segment_list(data)]

    def fetch_user_info_public(self, public_user_id: str) -> UserInfo:
        """Fetch a user's info by public user ID."""
        return parse_user_info(self._get_json("/userInfo", [("publicUserID", public_user_id)]))

    def fetch_user_info_local(self, local_user_id: str) -> UserInfo:
        """Fetch a user's info by local (private) user ID."""
        return parse_user_info(self._get_json("/userInfo", [("userID", local_user_id)]))

    def _fetch_user_stats(self, key: str, user_id: str) -> UserStats:
        params: _Params = [
            (key, user_id),
            ("fetchCategoryStats", "true"),
            ("fetchActionTypeStats", "true"),
        ]
        return parse_user_stats(self._get_json("/userStats", params))

    def fetch_user_stats_public(self, public_user_id: str) -> UserStats:
        """Fetch a user's statistics by public user ID."""
        return self._fetch_user_stats("publicUserID", public_user_id)

    def fetch_user_stats_local(self, local_user_id: str) -> UserStats:
        """Fetch a user's statistics by local (private) user ID."""
        return self._fetch_user_stats("userID", local_user_id)