"""devagent_providers.config.env
=============================

Centralized environment variable mapping and helpers for provider credentials.

Purpose
-------
- Provide a single source of truth for mapping provider identifiers to their
  corresponding environment variable names (canonical and aliases).
- Offer small utilities to look up provider API keys in a consistent way
  across the devagent_providers package.

Design Notes
------------
- Canonical mapping is defined in ``ENV_MAP``. Some providers (Gemini,
  Hugging Face) accept more than one env var name; list those in
  ``ENV_ALIASES`` with the canonical name first to establish precedence.
- Ollama runs locally without credentials and therefore has no entry.

Failure Modes
-------------
- Functions return ``None`` when a provider is unknown or no value is present.
- Helpers never raise on missing providers or unset variables; callers decide
  how to proceed (e.g., fallback to the settings store).
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider → env var mapping
ENV_MAP: Dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "cohere": "COHERE_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "groq": "GROQ_API_KEY",
    "huggingface": "HUGGINGFACE_API_KEY",
    "mistral": "MISTRAL_API_KEY",
    "openai": "OPENAI_API_KEY",
}


# Provider → ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "huggingface": ("HUGGINGFACE_API_KEY", "HF_TOKEN"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider, if any."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a provider.

    The canonical name is yielded first, followed by any aliases.
    """
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):  # pragma: no branch - small tuples
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        (value, env_var_used) for the first non-empty, non-placeholder value;
        (None, None) when nothing usable is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
