"""Anthropic provider adapter.

Talks to the Messages API over plain HTTP (``x-api-key`` +
``anthropic-version`` headers). The prompt becomes a single user message.

Streaming reads SSE ``data:`` lines and takes ``delta.text`` from each event;
``event:`` lines and events without a text delta (``message_start``,
``ping`` ...) are skipped. The stream ends on ``data: [DONE]`` or when the
server closes the connection.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.http_provider import BaseHttpProvider, RequestSpec, collect_field
from ..base.models import ProviderConfig, ProviderKind
from ..base.streaming import ANTHROPIC_SSE
from ..config.defaults import ANTHROPIC_API_VERSION, ANTHROPIC_MODELS_URL, DEFAULT_MAX_TOKENS


class AnthropicProvider(BaseHttpProvider):
    kind = ProviderKind.ANTHROPIC
    display_name = "Anthropic"
    stream_format = ANTHROPIC_SSE
    response_path = ("content", 0, "text")

    def _headers(self, cfg: ProviderConfig) -> Dict[str, str]:
        return {
            "x-api-key": cfg.api_key or "",
            "anthropic-version": ANTHROPIC_API_VERSION,
        }

    def build_request(self, cfg: ProviderConfig, prompt: str, *, stream: bool) -> RequestSpec:
        body: Dict[str, Any] = {
            "model": cfg.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": DEFAULT_MAX_TOKENS,
        }
        if stream:
            body["stream"] = True
        headers = {**self._headers(cfg), "Content-Type": "application/json"}
        return RequestSpec(url=cfg.base_url, headers=headers, json=body)

    def models_request(self, cfg: ProviderConfig) -> RequestSpec:
        return RequestSpec(url=ANTHROPIC_MODELS_URL, method="GET", headers=self._headers(cfg))

    def parse_models(self, data: Any) -> List[str]:
        # Older listings used models[].name; the current API returns data[].id.
        return collect_field(data, "models", "name") or collect_field(data, "data", "id")
