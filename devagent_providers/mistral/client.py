"""Mistral provider adapter (OpenAI-compatible endpoint)."""

from __future__ import annotations

from ..base.models import ProviderKind
from ..base.openai_style import BaseOpenAIStyleProvider
from ..config.defaults import MISTRAL_MODELS_URL


class MistralProvider(BaseOpenAIStyleProvider):
    kind = ProviderKind.MISTRAL
    display_name = "Mistral"
    models_url = MISTRAL_MODELS_URL
