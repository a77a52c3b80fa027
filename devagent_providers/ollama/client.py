"""Ollama provider adapter.

Purpose:
        Implements generation and streaming against the local Ollama HTTP API
        (default ``http://localhost:11434/api/generate``). Follows the unified
        streaming architecture via ``BaseStreamingAdapter`` with standardized
        timeouts, logging, and metrics.

External dependencies:
        - HTTP client only (``httpx``). No SDK or API key is required since
          Ollama is a local daemon; ``set_api_key`` is rejected.

Wire format:
        - Request: ``{"model", "prompt", "stream"}``.
        - Response: ``{"response": "..."}``.
        - Streaming: one JSON object per line carrying a ``response`` fragment;
          the daemon closes the connection when done. A line carrying
          ``{"error": ...}`` fails the stream with ``STREAM_ERROR``.
        - Model listing: ``GET /api/tags`` (``models[].name``), derived from
          the configured generate URL.
"""

from __future__ import annotations

from typing import Any, List

from ..base.errors import ErrorCode, ProviderError
from ..base.http_provider import BaseHttpProvider, RequestSpec, collect_field
from ..base.models import ProviderConfig, ProviderKind
from ..base.streaming import OLLAMA_NDJSON


class OllamaProvider(BaseHttpProvider):
    kind = ProviderKind.OLLAMA
    display_name = "Ollama"
    stream_format = OLLAMA_NDJSON
    response_path = ("response",)
    requires_api_key = False

    def build_request(self, cfg: ProviderConfig, prompt: str, *, stream: bool) -> RequestSpec:
        return RequestSpec(
            url=cfg.base_url,
            headers={"Content-Type": "application/json"},
            json={"model": cfg.model, "prompt": prompt, "stream": stream},
        )

    @staticmethod
    def tags_url(base_url: str) -> str:
        """Return the ``/api/tags`` URL matching a ``/api/generate`` URL."""
        return base_url.replace("/api/generate", "/api/tags")

    def models_request(self, cfg: ProviderConfig) -> RequestSpec:
        return RequestSpec(url=self.tags_url(cfg.base_url), method="GET")

    def parse_models(self, data: Any) -> List[str]:
        return collect_field(data, "models", "name")

    def set_api_key(self, api_key: str) -> None:
        """Ollama takes no credentials."""
        raise ProviderError(
            code=ErrorCode.UNSUPPORTED,
            message="Ollama does not use an API key",
            provider=self.provider_name,
            model=self.get_model(),
        )
