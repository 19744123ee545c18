from __future__ import annotations

from typing import Any

import requests

from ..errors import MalformedRemoteResponse, RemoteProviderFailure
from ..models import SummaryRequest
from .http import DEFAULT_TIMEOUT, JsonHttpProvider, require_text


class HuggingFaceSummarizer(JsonHttpProvider[SummaryRequest]):
    """Abstractive summarization through the Hugging Face inference API."""

    name = "Hugging Face summarizer"

    def __init__(
        self,
        model_url: str,
        *,
        api_token: str | None = None,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(session=session, timeout=timeout)
        self._model_url = model_url
        self._api_token = api_token

    def fetch(self, request: SummaryRequest) -> str:
        payload = {
            "inputs": request.text,
            "parameters": {
                "max_length": request.length_range.max,
                "min_length": request.length_range.min,
                "do_sample": False,
            },
        }
        headers = {}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        body = self._post_json(self._model_url, payload, headers=headers)
        return self._extract_summary(body)

    def _extract_summary(self, body: Any) -> str:
        if isinstance(body, dict) and body.get("error"):
            raise RemoteProviderFailure(self.name, str(body["error"]))
        if not isinstance(body, list) or not body or not isinstance(body[0], dict):
            raise MalformedRemoteResponse(self.name, "expected a list of summaries")
        return require_text(self.name, body[0].get("summary_text"), "summary_text")
