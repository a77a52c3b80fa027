"""BaseHttpProvider: shared lifecycle for the HTTP vendor adapters.

Purpose:
    Every supported vendor is a single JSON-over-HTTP endpoint. What differs is
    the request shape, the auth header, the response envelope and the stream
    line format. This base class owns everything else:

    - configuration resolution (:func:`devagent_providers.config.get_provider_config`)
      and persistence of ``set_model`` / ``set_api_key`` to the settings store;
    - per-call config snapshot and the fail-fast missing-key check;
    - the HTTP call through the pooled ``httpx.Client``;
    - envelope extraction, error mapping and structured logging;
    - streaming through :class:`BaseStreamingAdapter`.

Subclass surface:
    ``kind``, ``display_name``, ``stream_format``, ``response_path`` (class
    attributes) plus :meth:`build_request` and :meth:`models_request`.
    :meth:`parse_models`, :meth:`availability_request` and
    :meth:`extract_text` have defaults that most vendors keep.

Failure semantics:
    - ``generate_response`` / ``stream_response`` raise :class:`ProviderError`.
    - ``is_available`` never raises.
    - ``get_available_models`` raises only ``MISSING_API_KEY``; listing
      failures are logged and yield ``[]``.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple

import httpx

from ..config import get_provider_config
from ..config.defaults import SETTING_API_KEY, SETTING_API_URL, SETTING_MODEL
from .errors import ErrorCode, ProviderError, to_provider_error
from .http import get_httpx_client
from .interfaces import ChunkSink, SettingsStore
from .log_support import LogContext
from .logging import get_logger, normalized_log_event
from .models import ProviderConfig, ProviderKind
from .streaming import (
    BaseStreamingAdapter,
    ChatStreamEvent,
    StreamFormat,
    extract_path,
    raise_for_status,
)

# Failures raised by httpx before or while talking to a vendor.
HTTP_FAILURES = (httpx.HTTPError, httpx.InvalidURL)


@dataclass
class RequestSpec:
    """One outgoing HTTP request, fully resolved."""

    url: str
    method: str = "POST"
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    json: Optional[Any] = None


def _coerce_non_empty_str(candidate: Any, fallback: str) -> str:
    """Return a stripped string from ``candidate``, or ``fallback`` when empty."""
    if candidate is None:
        return fallback
    coerced = str(candidate).strip()
    return coerced or fallback


def collect_field(data: Any, list_key: str, item_key: str) -> List[str]:
    """Return ``[item[item_key] for item in data[list_key]]``, skipping junk."""
    if not isinstance(data, dict):
        return []
    items = data.get(list_key)
    if not isinstance(items, list):
        return []
    return [str(item[item_key]) for item in items if isinstance(item, dict) and item.get(item_key)]


class BaseHttpProvider:
    """Reusable base for the JSON-over-HTTP vendor adapters.

    Subclasses must define ``kind``, ``display_name``, ``stream_format``,
    ``response_path``, :meth:`build_request` and :meth:`models_request`.
    """

    kind: ClassVar[ProviderKind]
    display_name: ClassVar[str]
    stream_format: ClassVar[StreamFormat]
    response_path: ClassVar[Tuple[Any, ...]]
    requires_api_key: ClassVar[bool] = True

    def __init__(
        self,
        store: Optional[SettingsStore] = None,
        *,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> None:
        """Resolve configuration from the layered config stack.

        Parameters
        ----------
        store:
            Host settings store; read now and on :meth:`reload_config`,
            written by the setters. ``None`` disables persistence.
        api_url, model, api_key:
            Explicit overrides that win over every configuration layer.
        """
        self._store = store
        self._overrides = {SETTING_API_URL: api_url, SETTING_MODEL: model, SETTING_API_KEY: api_key}
        self._lock = threading.Lock()
        self._logger = get_logger(f"providers.{self.kind.value}")
        self._config = self._resolve_config()

    # ---- identity ----
    @property
    def provider_name(self) -> str:
        """Return the stable provider identifier string."""
        return self.kind.value

    # ---- configuration ----
    def _resolve_config(self) -> ProviderConfig:
        cfg = get_provider_config(self.kind.value, store=self._store, overrides=self._overrides)
        api_key = cfg.get(SETTING_API_KEY)
        return ProviderConfig(
            base_url=_coerce_non_empty_str(cfg.get(SETTING_API_URL), ""),
            model=_coerce_non_empty_str(cfg.get(SETTING_MODEL), ""),
            api_key=str(api_key).strip() if api_key else None,
        )

    def reload_config(self) -> None:
        """Re-read configuration (host configuration-change event)."""
        fresh = self._resolve_config()
        with self._lock:
            self._config = fresh

    def config_snapshot(self) -> ProviderConfig:
        """Return an immutable view of the current configuration."""
        with self._lock:
            return self._config.snapshot()

    def _persist(self, key: str, value: str) -> None:
        """Record a setter value so later reloads keep it.

        With a store the persisted value replaces any constructor override;
        without one the value becomes the override.
        """
        with self._lock:
            self._overrides[key] = None if self._store is not None else value
        if self._store is not None:
            self._store.update(self.kind.value, key, value)

    def set_model(self, model: str) -> None:
        with self._lock:
            self._config.model = model
        self._persist(SETTING_MODEL, model)

    def get_model(self) -> str:
        with self._lock:
            return self._config.model

    def set_api_key(self, api_key: str) -> None:
        with self._lock:
            self._config.api_key = api_key
        self._persist(SETTING_API_KEY, api_key)

    def _missing_key_error(self, cfg: ProviderConfig) -> ProviderError:
        return ProviderError(
            code=ErrorCode.MISSING_API_KEY,
            message=f"{self.display_name} API key not set. Please set it in the provider settings.",
            provider=self.provider_name,
            model=cfg.model,
        )

    def _call_config(self) -> ProviderConfig:
        """Snapshot the config for one call, failing fast without a key."""
        cfg = self.config_snapshot()
        if self.requires_api_key and not cfg.has_api_key():
            raise self._missing_key_error(cfg)
        return cfg

    def _ctx(self, cfg: ProviderConfig, spec: RequestSpec) -> LogContext:
        return LogContext(provider=self.provider_name, model=cfg.model, endpoint=spec.url)

    # ---- vendor hooks ----
    def build_request(self, cfg: ProviderConfig, prompt: str, *, stream: bool) -> RequestSpec:
        raise NotImplementedError

    def models_request(self, cfg: ProviderConfig) -> RequestSpec:
        raise NotImplementedError

    def availability_request(self, cfg: ProviderConfig) -> RequestSpec:
        return self.models_request(cfg)

    def parse_models(self, data: Any) -> List[str]:
        return collect_field(data, "data", "id")

    def extract_text(self, data: Any) -> Optional[str]:
        text = extract_path(data, self.response_path)
        return text if isinstance(text, str) else None

    # ---- HTTP ----
    def _send(self, spec: RequestSpec) -> httpx.Response:
        client = get_httpx_client(self.provider_name)
        return client.request(
            spec.method,
            spec.url,
            headers=spec.headers,
            params=spec.params or None,
            json=spec.json,
        )

    def _log_failure(self, event: str, ctx: LogContext, err: ProviderError) -> None:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="finalize",
            emitted=False,
            error_code=err.code.value,
            error=err.message,
            status=err.status,
        )

    # ---- LLMProvider surface ----
    def generate_response(self, prompt: str) -> str:
        """Send ``prompt`` and return the vendor's generated text.

        Raises:
            ProviderError: ``MISSING_API_KEY`` before any network call,
                ``HTTP_ERROR`` on a non-2xx status, ``MALFORMED_RESPONSE`` when
                the envelope lacks the text field, ``TRANSPORT`` when no
                response was received.
        """
        cfg = self._call_config()
        spec = self.build_request(cfg, prompt, stream=False)
        ctx = self._ctx(cfg, spec)
        normalized_log_event(self._logger, "generate.start", ctx, phase="start")
        try:
            resp = self._send(spec)
            raise_for_status(resp, provider=self.provider_name, model=cfg.model)
            try:
                data = resp.json()
            except ValueError:
                data = None
            text = self.extract_text(data)
            if text is None:
                raise ProviderError(
                    code=ErrorCode.MALFORMED_RESPONSE,
                    message=f"Unexpected response format from {self.display_name} API",
                    provider=self.provider_name,
                    model=cfg.model,
                    raw=data,
                )
        except ProviderError as e:
            self._log_failure("generate.error", ctx, e)
            raise
        except HTTP_FAILURES as e:
            err = to_provider_error(e, provider=self.provider_name, model=cfg.model)
            self._log_failure("generate.error", ctx, err)
            raise err from e
        normalized_log_event(self._logger, "generate.end", ctx, phase="finalize", emitted=True, chars=len(text))
        return text

    def iter_stream(self, prompt: str) -> Iterator[ChatStreamEvent]:
        """Start a streaming call and return its event iterator.

        Configuration and the missing-key check happen eagerly; the HTTP
        request is sent when iteration starts. The last event has
        ``finish=True`` and no delta.
        """
        cfg = self._call_config()
        spec = self.build_request(cfg, prompt, stream=True)
        client = get_httpx_client(self.provider_name)

        def _start():
            return client.stream(
                spec.method,
                spec.url,
                headers=spec.headers,
                params=spec.params or None,
                json=spec.json,
            )

        adapter = BaseStreamingAdapter(
            ctx=self._ctx(cfg, spec),
            provider_name=self.provider_name,
            model=cfg.model,
            starter=_start,
            stream_format=self.stream_format,
            logger=self._logger,
        )
        return adapter.run()

    def stream_response(self, prompt: str, on_chunk: ChunkSink) -> None:
        """Invoke ``on_chunk`` once per text delta, in arrival order."""
        for event in self.iter_stream(prompt):
            if event.delta:
                on_chunk(event.delta)

    def is_available(self) -> bool:
        """Best-effort reachability/credential probe; never raises."""
        cfg = self.config_snapshot()
        if self.requires_api_key and not cfg.has_api_key():
            return False
        spec = self.availability_request(cfg)
        try:
            return self._send(spec).is_success
        except HTTP_FAILURES as e:
            err = to_provider_error(e, provider=self.provider_name, model=cfg.model)
            self._log_failure("availability.error", self._ctx(cfg, spec), err)
            return False

    def get_available_models(self) -> List[str]:
        """Return vendor model ids; ``[]`` when the listing call fails."""
        cfg = self._call_config()
        spec = self.models_request(cfg)
        try:
            resp = self._send(spec)
            raise_for_status(resp, provider=self.provider_name, model=cfg.model)
            return self.parse_models(resp.json())
        except ProviderError as e:
            self._log_failure("models.error", self._ctx(cfg, spec), e)
        except HTTP_FAILURES as e:
            self._log_failure(
                "models.error",
                self._ctx(cfg, spec),
                to_provider_error(e, provider=self.provider_name, model=cfg.model),
            )
        except ValueError as e:
            self._log_failure(
                "models.error",
                self._ctx(cfg, spec),
                ProviderError(
                    code=ErrorCode.MALFORMED_RESPONSE,
                    message=f"Unexpected response format from {self.display_name} API",
                    provider=self.provider_name,
                    model=cfg.model,
                    raw=e,
                ),
            )
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config_snapshot().to_dict()})"


__all__ = ["BaseHttpProvider", "RequestSpec", "HTTP_FAILURES", "collect_field"]
