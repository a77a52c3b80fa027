"""Provider Factory utilities.

Purpose
-------
Centralize provider-agnostic creation of adapter instances implementing the
``LLMProvider`` interface. Adapters are imported lazily using ``importlib`` so
that importing the base package does not pull in every vendor module (and the
config layer they depend on).

External dependencies
---------------------
- Standard library only (``importlib``). Adapters use ``httpx``.

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an instance or raises a clear error. Falling
  back to ``ollama`` for unknown names is the dispatcher's job.

Scope
-----
Supported providers: ``ollama``, ``huggingface``, ``groq``, ``anthropic``,
``cohere``, ``gemini``, ``mistral`` and ``openai``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from .dto.adapter_params import AdapterParams
from .models import ProviderKind


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor raised an exception during initialization.
    """


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"groq"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Raises :class:`UnknownProviderError` with precise, actionable messages
      for unknown providers, import failures, missing classes, and constructor
      errors.
    """

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[ProviderKind, Dict[str, str]] = {
        ProviderKind.OLLAMA: {"module": "devagent_providers.ollama.client", "class": "OllamaProvider"},
        ProviderKind.HUGGINGFACE: {
            "module": "devagent_providers.huggingface.client",
            "class": "HuggingFaceProvider",
        },
        ProviderKind.GROQ: {"module": "devagent_providers.groq.client", "class": "GroqProvider"},
        ProviderKind.ANTHROPIC: {"module": "devagent_providers.anthropic.client", "class": "AnthropicProvider"},
        ProviderKind.COHERE: {"module": "devagent_providers.cohere.client", "class": "CohereProvider"},
        ProviderKind.GEMINI: {"module": "devagent_providers.gemini.client", "class": "GeminiProvider"},
        ProviderKind.MISTRAL: {"module": "devagent_providers.mistral.client", "class": "MistralProvider"},
        ProviderKind.OPENAI: {"module": "devagent_providers.openai.client", "class": "OpenAIProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str | ProviderKind,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name (case-insensitive) or :class:`ProviderKind`.
        params:
            Optional structured :class:`AdapterParams` instance; merged into
            ``kwargs`` with explicit kwargs taking precedence.
        **kwargs:
            Adapter constructor kwargs (``store``, ``api_url``, ``model``,
            ``api_key``).

        Raises
        ------
        UnknownProviderError
            If provider is unknown, the adapter module fails to import, the
            adapter class is missing, or the adapter constructor raises.
        """
        merged_kwargs = cls._coerce_params(params, kwargs)

        kind = provider if isinstance(provider, ProviderKind) else ProviderKind.parse(provider)
        spec = cls._PROVIDERS.get(kind) if kind is not None else None
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]

        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**merged_kwargs)  # type: ignore[call-arg]
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in deterministic order."""
        return tuple(kind.value for kind in cls._PROVIDERS)

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` into ``kwargs``.

        Values explicitly provided in ``kwargs`` take precedence over
        ``params``; ``None`` fields of ``params`` are ignored.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = dict(params.model_dump(exclude_none=True))
        # Adapter constructors don't take 'provider'
        merged.pop("provider", None)
        merged.update(kwargs)
        return merged
