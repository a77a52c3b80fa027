"""devagent_providers package

Uniform client abstraction over eight LLM vendor HTTP APIs (Ollama, Hugging
Face, Groq, Anthropic, Cohere, Gemini, Mistral, OpenAI).

Purpose:
    Provide a minimal, stable API for hosts such as an editor extension.
    Callers either use a provider adapter directly
    (``create("groq").generate_response(...)``) or hold one
    :class:`ProviderDispatcher` per session and let it forward to the active
    provider.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Factory: :func:`create`, :class:`ProviderFactory`, :class:`AdapterParams`
    - Session: :class:`ProviderDispatcher`
    - Contracts: :class:`LLMProvider`, :class:`SettingsStore`, :class:`ProviderKind`
    - Settings stores: :class:`InMemorySettingsStore`, :class:`JsonFileSettingsStore`
"""

from typing import Optional

from .base.errors import ErrorCode, ProviderError
from .base.dto import AdapterParams
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import LLMProvider, SettingsStore
from .base.models import ProviderKind
from .config.settings import InMemorySettingsStore, JsonFileSettingsStore
from .service.dispatcher import ProviderDispatcher

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    # Core helpers
    "create",
    "ProviderFactory",
    "AdapterParams",
    # Session
    "ProviderDispatcher",
    # Contracts
    "LLMProvider",
    "SettingsStore",
    "ProviderKind",
    # Settings stores
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
]


def create(provider_name: str, *, params: Optional[AdapterParams] = None, **kwargs):
    """Instantiate a provider adapter via ``ProviderFactory``.

    Parameters
    ----------
    provider_name:
        Canonical provider name (for example, ``"groq"``), case-insensitive.
    params:
        Optional typed parameter object (``AdapterParams``) carrying common
        adapter initialization fields.
    **kwargs:
        Adapter constructor keyword arguments (``store``, ``api_url``,
        ``model``, ``api_key``). When both ``params`` and ``kwargs`` provide
        the same field, ``kwargs`` take precedence.

    Raises
    ------
    ProviderError
        ``UNKNOWN_PROVIDER`` when the name is not one of the supported
        providers or the adapter cannot be constructed.
    """
    try:
        return ProviderFactory.create(provider_name, params=params, **kwargs)
    except UnknownProviderError as e:
        raise ProviderError(
            code=ErrorCode.UNKNOWN_PROVIDER,
            message=f"Failed to create provider '{provider_name}': {e}",
            provider=provider_name,
        ) from e
