from __future__ import annotations

from typing import Any

import requests

from ..errors import MalformedRemoteResponse
from ..models import TranslationRequest
from .http import DEFAULT_TIMEOUT, JsonHttpProvider, require_text


class MyMemoryTranslator(JsonHttpProvider[TranslationRequest]):
    """Translation through the public MyMemory GET endpoint."""

    name = "MyMemory"

    def __init__(
        self,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(session=session, timeout=timeout)
        self._url = url

    def fetch(self, request: TranslationRequest) -> str:
        body = self._get_json(
            self._url,
            params={
                "q": request.text,
                "langpair": f"{request.source_lang}|{request.target_lang}",
            },
        )
        if not isinstance(body, dict):
            raise MalformedRemoteResponse(self.name, "expected a JSON object")
        # MyMemory reports quota and input errors in-band with HTTP 200.
        if body.get("responseStatus") != 200:
            raise MalformedRemoteResponse(
                self.name, f"responseStatus {body.get('responseStatus')!r}"
            )
        data: Any = body.get("responseData") or {}
        if not isinstance(data, dict):
            raise MalformedRemoteResponse(self.name, "responseData is not an object")
        return require_text(self.name, data.get("translatedText"), "translatedText")


class LibreTranslateTranslator(JsonHttpProvider[TranslationRequest]):
    """Translation through a LibreTranslate instance."""

    name = "LibreTranslate"

    def __init__(
        self,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(session=session, timeout=timeout)
        self._url = url

    def fetch(self, request: TranslationRequest) -> str:
        body = self._post_json(
            self._url,
            {
                "q": request.text,
                "source": request.source_lang,
                "target": request.target_lang,
                "format": "text",
            },
        )
        if not isinstance(body, dict):
            raise MalformedRemoteResponse(self.name, "expected a JSON object")
        return require_text(self.name, body.get("translatedText"), "translatedText")
