"""
ProviderKind tag identifying each vendor adapter.

Every adapter carries its kind as an explicit attribute; the dispatcher reports
the active provider from this tag rather than inspecting adapter classes.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ProviderKind(str, Enum):
    """Canonical provider identifiers (lowercase, stable)."""

    OLLAMA = "ollama"
    HUGGINGFACE = "huggingface"
    GROQ = "groq"
    ANTHROPIC = "anthropic"
    COHERE = "cohere"
    GEMINI = "gemini"
    MISTRAL = "mistral"
    OPENAI = "openai"

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["ProviderKind"]:
        """Return the kind for ``name`` (case/whitespace-insensitive) or ``None``."""
        key = (name or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return None


DEFAULT_PROVIDER_KIND = ProviderKind.OLLAMA

__all__ = ["ProviderKind", "DEFAULT_PROVIDER_KIND"]
