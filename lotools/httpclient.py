"""A small JSON-over-HTTP client."""

from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from collections.abc import Mapping
from typing import Any

__all__ = ["JSON_HEADERS", "HttpRequestError", "request"]

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class HttpRequestError(Exception):
    """Raised when a request cannot be built, sent, read or decoded, or fails."""

    def __init__(
        self, message: str, status_code: int | None = None, body: bytes | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def _read(response: Any, status: int) -> bytes:
    try:
        return response.read()
    except (OSError, http.client.HTTPException) as exc:
        raise HttpRequestError(f"read response error {exc}", status) from exc


def _send(req: urllib.request.Request) -> tuple[int, bytes]:
    try:
        with urllib.request.urlopen(req) as response:
            return response.status, _read(response, response.status)
    except urllib.error.HTTPError as exc:
        with exc:
            return exc.code, _read(exc, exc.code)
    except (urllib.error.URLError, OSError, http.client.HTTPException) as exc:
        raise HttpRequestError(f"send request error {exc}") from exc


def request(
    method: str,
    url: str,
    data: Any = None,
    headers: Mapping[str, str] | None = None,
) -> tuple[Any, bytes]:
    """Send ``data`` as JSON and decode the JSON reply.

    Returns the decoded result (None for 204 No Content) and the raw body.
    Raises HttpRequestError on any failure, including non-2xx statuses.
    """
    body: bytes | None = None
    if data is not None:
        try:
            body = json.dumps(data).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise HttpRequestError(f"marshal request error {exc}") from exc

    try:
        req = urllib.request.Request(url, data=body, method=method)
    except ValueError as exc:
        raise HttpRequestError(f"create request error {exc}") from exc
    for key, value in (headers or {}).items():
        req.add_header(key, value)

    status, payload = _send(req)

    if not 200 <= status < 300:
        text = payload.decode("utf-8", errors="replace")
        raise HttpRequestError(
            f"HTTP request failed with status code {status}: {text}", status, payload
        )
    if status == http.HTTPStatus.NO_CONTENT:
        return None, payload
    try:
        return json.loads(payload), payload
    except ValueError as exc:
        raise HttpRequestError(f"decode response error {exc}", status, payload) from exc