"""Cohere provider adapter (legacy ``/v1/generate`` endpoint).

Request fields mirror the generate API: ``max_tokens``, ``temperature``,
``k``, ``stop_sequences`` and ``return_likelihoods``. The response text is
``generations[0].text``; streamed SSE events carry ``text``.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.http_provider import BaseHttpProvider, RequestSpec, collect_field
from ..base.models import ProviderConfig, ProviderKind
from ..base.streaming import COHERE_SSE
from ..config.defaults import COHERE_API_VERSION, COHERE_MODELS_URL, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE


class CohereProvider(BaseHttpProvider):
    kind = ProviderKind.COHERE
    display_name = "Cohere"
    stream_format = COHERE_SSE
    response_path = ("generations", 0, "text")

    def _headers(self, cfg: ProviderConfig) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {cfg.api_key}",
            "Cohere-Version": COHERE_API_VERSION,
        }

    def build_request(self, cfg: ProviderConfig, prompt: str, *, stream: bool) -> RequestSpec:
        body: Dict[str, Any] = {
            "model": cfg.model,
            "prompt": prompt,
            "max_tokens": DEFAULT_MAX_TOKENS,
            "temperature": DEFAULT_TEMPERATURE,
            "k": 0,
            "stop_sequences": [],
            "return_likelihoods": "NONE",
        }
        if stream:
            body["stream"] = True
        headers = {**self._headers(cfg), "Content-Type": "application/json"}
        return RequestSpec(url=cfg.base_url, headers=headers, json=body)

    def models_request(self, cfg: ProviderConfig) -> RequestSpec:
        return RequestSpec(url=COHERE_MODELS_URL, method="GET", headers=self._headers(cfg))

    def parse_models(self, data: Any) -> List[str]:
        return collect_field(data, "models", "id")
