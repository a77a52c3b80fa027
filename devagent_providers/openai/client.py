"""OpenAI provider adapter.

Uses the Chat Completions endpoint over plain HTTP; the shared wire contract
lives in :class:`~devagent_providers.base.openai_style.BaseOpenAIStyleProvider`.
The model catalogue also lists audio, image and embedding models, so only
``gpt-`` ids are offered.
"""

from __future__ import annotations

from typing import Any, List

from ..base.models import ProviderKind
from ..base.openai_style import BaseOpenAIStyleProvider
from ..config.defaults import OPENAI_CHAT_MODEL_PREFIX, OPENAI_MODELS_URL


class OpenAIProvider(BaseOpenAIStyleProvider):
    kind = ProviderKind.OPENAI
    display_name = "OpenAI"
    models_url = OPENAI_MODELS_URL

    def parse_models(self, data: Any) -> List[str]:
        return [m for m in super().parse_models(data) if m.startswith(OPENAI_CHAT_MODEL_PREFIX)]
