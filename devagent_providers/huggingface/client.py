"""Hugging Face Inference API provider adapter.

The configured URL is the models root; the model id is appended to the path.
Generation parameters sit under ``parameters`` (including the ``stream``
flag). Responses are a list of ``{"generated_text": ...}`` objects, and
streamed lines carry the same list shape.

The hub hosts far too many models to enumerate, so ``get_available_models``
returns a curated list without a network call. Availability is probed with a
``GET`` on the configured model.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.http_provider import BaseHttpProvider, RequestSpec
from ..base.models import ProviderConfig, ProviderKind
from ..base.streaming import HUGGINGFACE_NDJSON
from ..config.defaults import (
    DEFAULT_TEMPERATURE,
    HUGGINGFACE_CURATED_MODELS,
    HUGGINGFACE_MAX_NEW_TOKENS,
    HUGGINGFACE_TOP_P,
)


class HuggingFaceProvider(BaseHttpProvider):
    kind = ProviderKind.HUGGINGFACE
    display_name = "Hugging Face"
    stream_format = HUGGINGFACE_NDJSON
    response_path = (0, "generated_text")

    def _headers(self, cfg: ProviderConfig) -> Dict[str, str]:
        return {"Authorization": f"Bearer {cfg.api_key}"}

    def _model_url(self, cfg: ProviderConfig) -> str:
        return f"{cfg.base_url.rstrip('/')}/{cfg.model}"

    def build_request(self, cfg: ProviderConfig, prompt: str, *, stream: bool) -> RequestSpec:
        parameters: Dict[str, Any] = {
            "max_new_tokens": HUGGINGFACE_MAX_NEW_TOKENS,
            "temperature": DEFAULT_TEMPERATURE,
            "top_p": HUGGINGFACE_TOP_P,
            "do_sample": True,
        }
        if stream:
            parameters["stream"] = True
        return RequestSpec(
            url=self._model_url(cfg),
            headers={**self._headers(cfg), "Content-Type": "application/json"},
            json={"inputs": prompt, "parameters": parameters},
        )

    def models_request(self, cfg: ProviderConfig) -> RequestSpec:
        return RequestSpec(url=self._model_url(cfg), method="GET", headers=self._headers(cfg))

    def get_available_models(self) -> List[str]:
        return list(HUGGINGFACE_CURATED_MODELS)
