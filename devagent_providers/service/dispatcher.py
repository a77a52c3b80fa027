"""ProviderDispatcher: one active provider per session.

Purpose
-------
Holds one pre-constructed adapter per :class:`ProviderKind`, tracks which one
is active, and forwards calls to it. Hosts create one dispatcher per session
and pass it to the features that need a model (see
:mod:`devagent_providers.features`).

Failure semantics
-----------------
- ``query`` never raises: a failure is reported once through the notifier and
  ``""`` is returned.
- ``stream_response`` and the other pass-throughs propagate
  :class:`ProviderError` unchanged.
- ``set_provider`` with an unknown name reports ``UNKNOWN_PROVIDER`` through
  the notifier and selects ``ollama``.

Concurrency
-----------
Every forwarding method reads the active provider once, at call start. A
concurrent ``set_provider`` only affects calls that start afterwards.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Mapping, Optional

from ..base.errors import ErrorCode, to_provider_error
from ..base.factory import ProviderFactory
from ..base.interfaces import ChunkSink, LLMProvider, SettingsStore
from ..base.log_support import LogContext
from ..base.logging import get_logger, normalized_log_event
from ..base.models import DEFAULT_PROVIDER_KIND, ProviderKind
from ..config import get_active_provider
from ..config.defaults import ACTIVE_PROVIDER_KEY, GLOBAL_SETTINGS_SECTION

Notifier = Callable[[str], None]


class ProviderDispatcher:
    """Select and forward to the active provider.

    Parameters
    ----------
    store:
        Host settings store. Supplies the initial selection and provider
        configuration; ``set_provider`` and the provider setters write to it.
    notifier:
        Receives user-facing error messages (``query`` failures, unknown
        provider names). Defaults to logging them at ERROR.
    providers:
        Optional pre-built adapters keyed by kind; missing kinds are created
        through :class:`ProviderFactory`.
    """

    def __init__(
        self,
        store: Optional[SettingsStore] = None,
        *,
        notifier: Optional[Notifier] = None,
        providers: Optional[Mapping[ProviderKind, LLMProvider]] = None,
    ) -> None:
        self._store = store
        self._logger = get_logger("dispatcher")
        self._notify = notifier or self._log_notification
        self._lock = threading.Lock()
        given = dict(providers or {})
        self._providers: Dict[ProviderKind, LLMProvider] = {
            kind: given.get(kind) or ProviderFactory.create(kind, store=store) for kind in ProviderKind
        }
        self._active: LLMProvider = self._providers[DEFAULT_PROVIDER_KIND]
        self._select(get_active_provider(store), persist=False)

    def _log_notification(self, message: str) -> None:
        self._logger.error(message)

    # ---- selection ----
    def _select(self, name: str, *, persist: bool) -> ProviderKind:
        kind = ProviderKind.parse(name)
        if kind is None:
            normalized_log_event(
                self._logger,
                "dispatcher.unknown_provider",
                LogContext(provider=str(name)),
                phase="select",
                error_code=ErrorCode.UNKNOWN_PROVIDER.value,
                fallback=DEFAULT_PROVIDER_KIND.value,
            )
            self._notify(f"Unknown AI provider: {name}. Defaulting to Ollama.")
            kind = DEFAULT_PROVIDER_KIND
        with self._lock:
            previous = self._active.kind
            self._active = self._providers[kind]
        if persist and self._store is not None:
            self._store.update(GLOBAL_SETTINGS_SECTION, ACTIVE_PROVIDER_KEY, kind.value)
        if previous is not kind:
            normalized_log_event(
                self._logger,
                "dispatcher.provider_changed",
                LogContext(provider=kind.value),
                phase="select",
                previous=previous.value,
            )
        return kind

    def set_provider(self, name: str) -> ProviderKind:
        """Activate ``name`` (case-insensitive); unknown names fall back to ollama."""
        return self._select(name, persist=True)

    def get_current_provider(self) -> str:
        return self._active.kind.value

    def get_provider(self, kind: ProviderKind) -> LLMProvider:
        """Return the adapter held for ``kind`` (active or not)."""
        return self._providers[kind]

    @property
    def active(self) -> LLMProvider:
        return self._active

    def reload_from_settings(self) -> None:
        """Re-read every provider's configuration and the active selector."""
        for provider in self._providers.values():
            reload = getattr(provider, "reload_config", None)
            if reload is not None:
                reload()
        self._select(get_active_provider(self._store), persist=False)

    # ---- forwarding ----
    def query(self, prompt: str) -> str:
        """Return the active provider's answer, or ``""`` after notifying."""
        provider = self._active
        try:
            return provider.generate_response(prompt)
        except Exception as e:  # query is the host's no-raise entry point
            err = to_provider_error(e, provider=provider.provider_name, model=None)
            normalized_log_event(
                self._logger,
                "dispatcher.query_failed",
                LogContext(provider=provider.provider_name, model=err.model),
                phase="finalize",
                emitted=False,
                error_code=err.code.value,
                error=err.message,
                status=err.status,
            )
            self._notify(f"Error querying AI provider: {err.message}")
            return ""

    def stream_response(self, prompt: str, on_chunk: ChunkSink) -> None:
        """Stream from the active provider; failures propagate."""
        provider = self._active
        provider.stream_response(prompt, on_chunk)

    def is_provider_available(self) -> bool:
        return self._active.is_available()

    def get_available_models(self) -> List[str]:
        return self._active.get_available_models()

    def set_model(self, model: str) -> None:
        self._active.set_model(model)

    def get_model(self) -> str:
        return self._active.get_model()

    def set_api_key(self, api_key: str) -> None:
        self._active.set_api_key(api_key)


__all__ = ["ProviderDispatcher", "Notifier"]
