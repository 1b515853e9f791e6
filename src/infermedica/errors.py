"""Exception taxonomy for the Infermedica client.

Argument problems (missing credentials, bad configuration) raise the
built-in ValueError / TypeError. Everything else derives from
InfermedicaError so callers can catch the library's failures in one place.
"""

from __future__ import annotations


class InfermedicaError(Exception):
    """Base class for all errors raised by this package."""


class HttpError(InfermedicaError):
    """The API call did not produce the expected result.

    Carries the status code, request path and raw body so the caller can
    decide whether to retry or abort. Nothing is retried automatically.
    """

    def __init__(self, status_code: int | None, path: str | None, body: str = ""):
        self.status_code = status_code
        self.path = path
        self.body = body
        super().__init__(f"HTTP {status_code} for {path}: {body[:200]}")


class MalformedResponse(HttpError):
    """A 2xx response whose body is empty or not valid JSON."""

    def __init__(self, status_code: int | None, path: str | None, body: str = ""):
        super().__init__(status_code, path, body)
        self.args = (f"Malformed response (HTTP {status_code}) for {path}: {body[:200]!r}",)


class TransportFailure(HttpError):
    """The request never completed (DNS, connect, timeout, ...)."""

    def __init__(self, path: str, reason: str):
        super().__init__(None, path, "")
        self.reason = reason
        self.args = (f"Transport failure for {path}: {reason}",)


class MissingField(InfermedicaError):
    """A required request field was not set."""
