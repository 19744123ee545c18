from __future__ import annotations

import logging
from typing import Any, Generic, Mapping

import requests

from ..errors import MalformedRemoteResponse, RemoteProviderFailure
from ..fallback import Provider, RequestT

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class JsonHttpProvider(Provider[RequestT], Generic[RequestT]):
    """Shared plumbing for providers that speak JSON over HTTP."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def _get_json(self, url: str, params: Mapping[str, str]) -> Any:
        logger.debug("GET %s via %s", url, self.name)
        response = self._session.get(url, params=params, timeout=self._timeout)
        return self._decode(response)

    def _post_json(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        logger.debug("POST %s via %s", url, self.name)
        merged = {"Content-Type": "application/json"}
        merged.update(headers or {})
        response = self._session.post(
            url, json=payload, headers=merged, timeout=self._timeout
        )
        return self._decode(response)

    def _decode(self, response: requests.Response) -> Any:
        if not 200 <= response.status_code < 300:
            raise RemoteProviderFailure(self.name, f"HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedRemoteResponse(self.name, "response body is not JSON") from exc


def require_text(provider: str, value: Any, field_name: str) -> str:
    """Return value when it is a non-blank string, else raise MalformedRemoteResponse."""
    if not isinstance(value, str) or not value.strip():
        raise MalformedRemoteResponse(provider, f"missing '{field_name}'")
    return value
