"""Gemini provider adapter (Generative Language REST API).

The configured URL is the models collection; the model and the RPC are
appended per call (``{base}/{model}:generateContent`` or
``:streamGenerateContent``). The API key travels as the ``key`` query
parameter rather than a header.

Streaming expects one JSON candidate object per line with no SSE prefix; the
stream ends when the server closes the connection.
"""

from __future__ import annotations

from typing import Any, List

from ..base.http_provider import BaseHttpProvider, RequestSpec, collect_field
from ..base.models import ProviderConfig, ProviderKind
from ..base.streaming import GEMINI_NDJSON
from ..config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, GEMINI_TOP_K, GEMINI_TOP_P


class GeminiProvider(BaseHttpProvider):
    kind = ProviderKind.GEMINI
    display_name = "Gemini"
    stream_format = GEMINI_NDJSON
    response_path = ("candidates", 0, "content", "parts", 0, "text")

    def build_request(self, cfg: ProviderConfig, prompt: str, *, stream: bool) -> RequestSpec:
        method = "streamGenerateContent" if stream else "generateContent"
        return RequestSpec(
            url=f"{cfg.base_url.rstrip('/')}/{cfg.model}:{method}",
            headers={"Content-Type": "application/json"},
            params={"key": cfg.api_key or ""},
            json={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": {
                    "temperature": DEFAULT_TEMPERATURE,
                    "topK": GEMINI_TOP_K,
                    "topP": GEMINI_TOP_P,
                    "maxOutputTokens": DEFAULT_MAX_TOKENS,
                },
            },
        )

    def models_request(self, cfg: ProviderConfig) -> RequestSpec:
        return RequestSpec(url=cfg.base_url, method="GET", params={"key": cfg.api_key or ""})

    def parse_models(self, data: Any) -> List[str]:
        return collect_field(data, "models", "name")
