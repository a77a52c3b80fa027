"""LLMProvider Protocol (single-class module).

Defines the uniform contract every vendor adapter satisfies.
"""

from __future__ import annotations

from typing import Callable, List, Protocol, runtime_checkable

from ..models import ProviderKind

ChunkSink = Callable[[str], None]


@runtime_checkable
class LLMProvider(Protocol):
    """Uniform interface for Large Language Model providers.

    Implementations map a plain prompt onto their vendor's request shape,
    normalize the response envelope to plain text, and never leak vendor
    payloads upstream.
    """

    @property
    def kind(self) -> ProviderKind:
        """Explicit tag identifying the vendor."""
        ...

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"ollama"``."""
        ...

    def generate_response(self, prompt: str) -> str:
        """Return the generated text; raise ``ProviderError`` on failure."""
        ...

    def stream_response(self, prompt: str, on_chunk: ChunkSink) -> None:
        """Invoke ``on_chunk`` once per text delta, returning at end of stream."""
        ...

    def is_available(self) -> bool:
        """Best-effort reachability/credential check; never raises."""
        ...

    def get_available_models(self) -> List[str]:
        """Return vendor model identifiers."""
        ...

    def set_model(self, model: str) -> None:
        ...

    def get_model(self) -> str:
        ...

    def set_api_key(self, api_key: str) -> None:
        ...
