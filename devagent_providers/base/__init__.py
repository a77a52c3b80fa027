"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, streaming primitives and the
provider factory for use within the providers layer and by the dispatcher.

Layout:
- Interfaces: the ``LLMProvider`` contract and the ``SettingsStore`` seam
- Models (DTOs): ``ProviderConfig`` and the ``ProviderKind`` tag
- Streaming: line decoder, vendor stream formats, shared streaming adapter
- Factory: lazy creation of provider adapters by canonical name

``BaseHttpProvider`` lives in :mod:`.http_provider` and is imported from there
directly; it depends on the config layer, which itself depends on this package.
"""

from .errors import ErrorCode, ProviderError, classify_exception
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import ChunkSink, LLMProvider, SettingsStore
from .models import DEFAULT_PROVIDER_KIND, ProviderConfig, ProviderKind
from .timeouts import TimeoutConfig, get_timeout_config
from .streaming import (
    BaseStreamingAdapter,
    ChatStreamEvent,
    StreamFormat,
    StreamMetrics,
    iter_deltas,
)

__all__ = [
    # Errors
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    # Models
    "ProviderConfig",
    "ProviderKind",
    "DEFAULT_PROVIDER_KIND",
    # Interfaces
    "LLMProvider",
    "SettingsStore",
    "ChunkSink",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
    # Streaming
    "BaseStreamingAdapter",
    "ChatStreamEvent",
    "StreamFormat",
    "StreamMetrics",
    "iter_deltas",
]
