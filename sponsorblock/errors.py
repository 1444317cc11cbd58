"""Errors raised by the SponsorBlock client."""

from __future__ import annotations

StatusCode = int


class SponsorBlockError(Exception):
    """Base class for every error raised by this package."""


class _HttpStatusError(SponsorBlockError):
    """An HTTP response that carried a non-success status code."""

    _template = "HTTP error, with status code {}"

    def __init__(self, status: StatusCode) -> None:
        self.status = status
        super().__init__(self._template.format(status))


class HttpApiError(_HttpStatusError):
    """An internal server error reported by the API (5xx)."""

    _template = "internal API error, with status code {}"


class HttpClientError(_HttpStatusError):
    """A client-side HTTP error (4xx).

    A status of 404 means nothing matching the request is in the database.
    """

    _template = "client HTTP error, with status code {}"


class HttpUnknownError(_HttpStatusError):
    """Any other non-success HTTP status."""

    _template = "unknown HTTP error, with status code {}"


class HttpCommunicationError(SponsorBlockError):
    """A network or protocol failure while talking to the API."""

    def __init__(self) -> None:
        super().__init__("unable to communicate with the API")


class NoMatchingVideoHashError(SponsorBlockError):
    """No hash match returned by the API belongs to the requested video ID."""

    def __init__(self) -> None:
        super().__init__("unable to find a matching hash for the provided video ID")


class DeserializationError(SponsorBlockError):
    """Data received from the API could not be decoded."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = "unable to deserialize data from the API"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class BadDataError(SponsorBlockError):
    """Data received from the API fails sanity checks."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"data received from the API does not meet verification: {message}")


class UnknownValueError(DeserializationError):
    """A value received from the API is not recognised."""

    def __init__(self, kind: str, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"received an unrecognized value of type '{kind}' from the API: {value}")