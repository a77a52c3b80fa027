"""Streaming package for provider layer.

Exposes streaming primitives, the line decoder, and the shared adapter under a
single namespace.
"""

from .streaming import ChatStreamEvent, accumulate_text
from .streaming_metrics import StreamMetrics
from .line_decoder import (
    ANTHROPIC_SSE,
    COHERE_SSE,
    GEMINI_NDJSON,
    HUGGINGFACE_NDJSON,
    OLLAMA_NDJSON,
    OPENAI_SSE,
    StreamFormat,
    StreamPayloadError,
    decode_line,
    extract_path,
    iter_deltas,
)
from .streaming_adapter import BaseStreamingAdapter, raise_for_status

__all__ = [
    "ChatStreamEvent",
    "accumulate_text",
    "StreamMetrics",
    "StreamFormat",
    "StreamPayloadError",
    "decode_line",
    "extract_path",
    "iter_deltas",
    "OLLAMA_NDJSON",
    "ANTHROPIC_SSE",
    "COHERE_SSE",
    "OPENAI_SSE",
    "GEMINI_NDJSON",
    "HUGGINGFACE_NDJSON",
    "BaseStreamingAdapter",
    "raise_for_status",
]
