"""Synchronous HTTP transport for the Infermedica REST API.

The connection is intentionally thin: it attaches the auth headers,
performs exactly one round trip per call and returns the parsed JSON.
Wrapping JSON into domain objects happens in client.py.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from infermedica.errors import HttpError, MalformedResponse, TransportFailure

logger = structlog.get_logger()

DEFAULT_ENDPOINT = "https://api.infermedica.com/v2"
DEFAULT_TIMEOUT = 30.0


class Connection:
    """HTTP client bound to one set of credentials and one endpoint."""

    def __init__(
        self,
        api_id: str,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        model: str | None = None,
        interview_id: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        if not api_id:
            raise ValueError("api_id is required")
        if not api_key:
            raise ValueError("api_key is required")

        self._api_id = api_id
        self._api_key = api_key
        self.endpoint = endpoint.rstrip("/")
        self.model = model
        self.interview_id = str(interview_id) if interview_id is not None else None
        self.last_path: str | None = None
        self.last_status: int | None = None
        self._http = httpx.Client(
            base_url=self.endpoint,
            timeout=timeout,
            headers=self._headers(),
            transport=transport,
        )

    def _headers(self) -> dict[str, str]:
        headers = {
            "App-Id": self._api_id,
            "App-Key": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.model:
            headers["Model"] = self.model
        if self.interview_id:
            headers["Interview-Id"] = self.interview_id
        return headers

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET endpoint + path and return the parsed JSON body."""
        return self._request("GET", path, params=params)

    def post(self, path: str, body: str, extra_query: dict[str, Any] | None = None) -> Any:
        """POST a JSON string to endpoint + path and return the parsed JSON body."""
        return self._request("POST", path, params=extra_query, content=body)

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        content: str | None = None,
    ) -> Any:
        try:
            resp = self._http.request(method, path, params=params or None, content=content)
        except httpx.TransportError as exc:
            logger.error("infermedica_transport_error", method=method, path=path, error=str(exc))
            raise TransportFailure(path, str(exc)) from exc

        self.last_path = path
        self.last_status = resp.status_code
        logger.debug("infermedica_request", method=method, path=path, status=resp.status_code)

        if not resp.is_success:
            logger.warning(
                "infermedica_http_error",
                method=method,
                path=path,
                status=resp.status_code,
                body=resp.text[:200],
            )
            raise HttpError(resp.status_code, path, resp.text)

        if not resp.content.strip():
            raise MalformedResponse(resp.status_code, path, resp.text)
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("infermedica_malformed_response", path=path, body=resp.text[:200])
            raise MalformedResponse(resp.status_code, path, resp.text) from exc

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
