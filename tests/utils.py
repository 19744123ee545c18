from __future__ import annotations

from typing import Any

import requests

NOT_JSON = object()


class DummyResponse:
    """Stand-in for requests.Response with a fixed status and JSON body."""

    def __init__(self, status_code: int = 200, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> Any:
        if self._payload is NOT_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class DummySession:
    """Records calls and replays queued responses (or raises queued errors)."""

    def __init__(
        self,
        get: list[Any] | None = None,
        post: list[Any] | None = None,
        default: Any = None,
    ) -> None:
        self._get = list(get or [])
        self._post = list(post or [])
        self._default = default
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> DummyResponse:
        self.calls.append({"method": "GET", "url": url, **kwargs})
        return self._next(self._get)

    def post(self, url: str, **kwargs: Any) -> DummyResponse:
        self.calls.append({"method": "POST", "url": url, **kwargs})
        return self._next(self._post)

    def _next(self, queue: list[Any]) -> DummyResponse:
        item = queue.pop(0) if queue else self._default
        if item is None:
            raise requests.ConnectionError("no response queued")
        if isinstance(item, Exception):
            raise item
        return item


def failing_session(status_code: int = 503) -> DummySession:
    """Session whose every request answers with the given error status."""
    return DummySession(default=DummyResponse(status_code, {"error": "unavailable"}))
