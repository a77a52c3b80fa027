"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (endpoint URLs, models).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by DEVAGENT_CONFIG_FILE
    3. Environment variables (e.g. GROQ_MODEL, GROQ_API_KEY, GROQ_API_URL)
    4. Host settings store (``SettingsStore``), when one is supplied
    5. In-code overrides passed to helper
* Provide a single call site: ``get_provider_config(provider, store=..., overrides=...)``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_API_KEY, <PROVIDER>_API_URL
e.g. OPENAI_MODEL, OLLAMA_API_URL. API keys additionally honour the aliases in
:mod:`devagent_providers.config.env` (``GOOGLE_API_KEY``, ``HF_TOKEN``).

External Config File (Optional)
-------------------------------
If DEVAGENT_CONFIG_FILE is set to a path, we attempt to load JSON first, then
YAML. Structure example:

```
groq:
  model: llama3-8b-8192
ollama:
  api_url: http://gpu-box:11434/api/generate
```

Public API
----------
* get_provider_config(provider, store=None, overrides=None) -> dict
* get_active_provider(store=None) -> str
* get_model(provider) -> str | None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from ..base.interfaces import SettingsStore
from ..base.logging import get_logger
from .defaults import (
    ACTIVE_PROVIDER_KEY,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    COHERE_DEFAULT_BASE_URL,
    COHERE_DEFAULT_MODEL,
    DEFAULT_PROVIDER,
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    GLOBAL_SETTINGS_SECTION,
    GROQ_DEFAULT_BASE_URL,
    GROQ_DEFAULT_MODEL,
    HUGGINGFACE_DEFAULT_BASE_URL,
    HUGGINGFACE_DEFAULT_MODEL,
    MISTRAL_DEFAULT_BASE_URL,
    MISTRAL_DEFAULT_MODEL,
    OLLAMA_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    SETTING_API_KEY,
    SETTING_API_URL,
    SETTING_MODEL,
)
from .env import is_placeholder, resolve_provider_key

_logger = get_logger("config")

# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "ollama": {"api_url": OLLAMA_DEFAULT_BASE_URL, "model": OLLAMA_DEFAULT_MODEL},
    "anthropic": {"api_url": ANTHROPIC_DEFAULT_BASE_URL, "model": ANTHROPIC_DEFAULT_MODEL},
    "cohere": {"api_url": COHERE_DEFAULT_BASE_URL, "model": COHERE_DEFAULT_MODEL},
    "gemini": {"api_url": GEMINI_DEFAULT_BASE_URL, "model": GEMINI_DEFAULT_MODEL},
    "groq": {"api_url": GROQ_DEFAULT_BASE_URL, "model": GROQ_DEFAULT_MODEL},
    "mistral": {"api_url": MISTRAL_DEFAULT_BASE_URL, "model": MISTRAL_DEFAULT_MODEL},
    "openai": {"api_url": OPENAI_DEFAULT_BASE_URL, "model": OPENAI_DEFAULT_MODEL},
    "huggingface": {"api_url": HUGGINGFACE_DEFAULT_BASE_URL, "model": HUGGINGFACE_DEFAULT_MODEL},
}


ENV_FIELD_MAP = {
    SETTING_MODEL: "MODEL",
    SETTING_API_KEY: "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    SETTING_API_URL: "API_URL",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    """Load the optional config file, cached per path."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv("DEVAGENT_CONFIG_FILE")
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    _FILE_CACHE_PATH = path
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any
    # Try JSON first; YAML is a superset so it is the fallback.
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            _logger.warning("config file %s is neither JSON nor YAML: %s", path, e)
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the cached config file contents (tests, host reload)."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val and not is_placeholder(val):
            out[field] = val
    if SETTING_API_KEY not in out:
        key, _ = resolve_provider_key(provider)
        if key:
            out[SETTING_API_KEY] = key
    return out


def _store_values(provider: str, store: Optional[SettingsStore]) -> Dict[str, Any]:
    if store is None:
        return {}
    out: Dict[str, Any] = {}
    for field in ENV_FIELD_MAP:
        val = store.get(provider, field)
        if val:
            out[field] = val
    return out


def get_provider_config(
    provider: str,
    store: Optional[SettingsStore] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> settings store -> overrides
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= {k: v for k, v in file_cfg.items() if v is not None}

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Host settings store
    cfg |= _store_values(name, store)

    # 5. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_active_provider(store: Optional[SettingsStore] = None) -> str:
    """Return the configured provider selector (unvalidated), defaulting to ollama."""
    if store is not None:
        val = store.get(GLOBAL_SETTINGS_SECTION, ACTIVE_PROVIDER_KEY)
        if val:
            return str(val)
    return os.getenv("DEVAGENT_PROVIDER") or DEFAULT_PROVIDER


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get(SETTING_MODEL)


__all__ = [
    "get_provider_config",
    "get_active_provider",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
