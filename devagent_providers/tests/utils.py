"""Shared testing utilities for the provider tests.

Exports:
    - FakeVendor: ``httpx.MockTransport`` handler that records requests.
    - make_provider(kind, store=None, **kwargs): adapter with a test key.
    - KEYED_KINDS: every provider kind that requires an API key.
    - STREAM_CASES: per-vendor envelope and stream fixtures.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx

from devagent_providers.base.factory import ProviderFactory
from devagent_providers.base.models import ProviderKind

Handler = Callable[[httpx.Request], httpx.Response]

KEYED_KINDS = [kind for kind in ProviderKind if kind is not ProviderKind.OLLAMA]


class FakeVendor:
    """Records requests and answers them with ``handler``."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(500)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond_json(self, payload: Any, status: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status, json=payload)

    def respond_stream(self, body: bytes, status: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status, content=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def make_provider(kind: ProviderKind, store: Optional[Any] = None, **kwargs: Any):
    """Build an adapter; keyed vendors get ``api_key="k"`` unless overridden."""
    if kind is not ProviderKind.OLLAMA:
        kwargs.setdefault("api_key", "k")
    return ProviderFactory.create(kind, store=store, **kwargs)


def _sse(*payloads: str) -> bytes:
    return "".join(f"data: {p}\n\n" for p in payloads).encode()


def _lines(*payloads: str) -> bytes:
    return "".join(f"{p}\n" for p in payloads).encode()


def _openai_case() -> Dict[str, Any]:
    return {
        "envelope": {"choices": [{"message": {"content": "Hello"}}]},
        "stream": _sse(
            '{"choices":[{"delta":{"role":"assistant"}}]}',
            '{"choices":[{"delta":{"content":"He"}}]}',
            '{"choices":[{"delta":{"content":"llo"}}]}',
            "[DONE]",
        ),
    }


# Non-streaming envelope answering "Hello" and a stream delivering "He" + "llo".
STREAM_CASES: Dict[ProviderKind, Dict[str, Any]] = {
    ProviderKind.OLLAMA: {
        "envelope": {"response": "Hello", "done": True},
        "stream": _lines('{"response":"He","done":false}', '{"response":"llo","done":false}', '{"response":"","done":true}'),
    },
    ProviderKind.ANTHROPIC: {
        "envelope": {"content": [{"type": "text", "text": "Hello"}]},
        "stream": (
            b"event: message_start\n"
            b'data: {"type":"message_start","message":{}}\n\n'
            b"event: content_block_delta\n"
            b'data: {"type":"content_block_delta","delta":{"type":"text_delta","text":"He"}}\n\n'
            b'data: {"type":"content_block_delta","delta":{"text":"llo"}}\n\n'
            b"data: [DONE]\n\n"
        ),
    },
    ProviderKind.COHERE: {
        "envelope": {"generations": [{"text": "Hello"}]},
        "stream": _sse('{"text":"He"}', '{"text":"llo"}', "[DONE]"),
    },
    ProviderKind.GEMINI: {
        "envelope": {"candidates": [{"content": {"parts": [{"text": "Hello"}]}}]},
        "stream": _lines(
            '{"candidates":[{"content":{"parts":[{"text":"He"}]}}]}',
            '{"candidates":[{"content":{"parts":[{"text":"llo"}]}}]}',
        ),
    },
    ProviderKind.HUGGINGFACE: {
        "envelope": [{"generated_text": "Hello"}],
        "stream": _lines('[{"generated_text":"He"}]', '[{"generated_text":"llo"}]'),
    },
    ProviderKind.GROQ: _openai_case(),
    ProviderKind.MISTRAL: _openai_case(),
    ProviderKind.OPENAI: _openai_case(),
}
