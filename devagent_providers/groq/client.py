"""Groq provider adapter (OpenAI-compatible endpoint)."""

from __future__ import annotations

from ..base.models import ProviderKind
from ..base.openai_style import BaseOpenAIStyleProvider
from ..config.defaults import GROQ_MODELS_URL


class GroqProvider(BaseOpenAIStyleProvider):
    kind = ProviderKind.GROQ
    display_name = "Groq"
    models_url = GROQ_MODELS_URL
