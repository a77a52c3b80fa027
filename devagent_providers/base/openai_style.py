"""BaseOpenAIStyleProvider for OpenAI-compatible Chat Completions endpoints.

Purpose:
- Groq, Mistral and OpenAI share one wire contract: ``Bearer`` auth, a
  ``messages`` array, ``choices[0].message.content`` in the response, and SSE
  ``data:`` lines ending with ``[DONE]`` when streaming. Subclasses only set
  their identity, display name and model-listing URL.

External dependencies:
- ``httpx`` via :class:`BaseHttpProvider`. No vendor SDKs.
"""

from __future__ import annotations

from typing import ClassVar, Dict

from ..config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .http_provider import BaseHttpProvider, RequestSpec
from .models import ProviderConfig
from .streaming import OPENAI_SSE


class BaseOpenAIStyleProvider(BaseHttpProvider):
    """Reusable base class for OpenAI-compatible providers.

    Subclasses must define ``kind``, ``display_name`` and ``models_url``.
    """

    stream_format = OPENAI_SSE
    response_path = ("choices", 0, "message", "content")
    models_url: ClassVar[str]

    def _auth_headers(self, cfg: ProviderConfig) -> Dict[str, str]:
        return {"Authorization": f"Bearer {cfg.api_key}"}

    def build_request(self, cfg: ProviderConfig, prompt: str, *, stream: bool) -> RequestSpec:
        body = {
            "model": cfg.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": DEFAULT_MAX_TOKENS,
            "temperature": DEFAULT_TEMPERATURE,
        }
        if stream:
            body["stream"] = True
        headers = {"Content-Type": "application/json", **self._auth_headers(cfg)}
        return RequestSpec(url=cfg.base_url, headers=headers, json=body)

    def models_request(self, cfg: ProviderConfig) -> RequestSpec:
        return RequestSpec(url=self.models_url, method="GET", headers=self._auth_headers(cfg))


__all__ = ["BaseOpenAIStyleProvider"]
