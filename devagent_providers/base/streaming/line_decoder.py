"""Line-oriented decoder for vendor streaming bodies.

Every supported vendor streams newline-delimited records, either bare JSON
(NDJSON) or Server-Sent-Events ``data:`` lines. They differ only in three
details, captured by :class:`StreamFormat`:

* ``prefix``: the SSE field to strip (``"data:"``); ``None`` for NDJSON.
  For SSE formats, lines without the prefix (``event:``, ``id:``, comments)
  carry no delta and are ignored.
* ``end_marker``: the literal payload that ends the stream (``"[DONE]"``);
  ``None`` when the vendor ends by closing the connection.
* ``delta_path``: keys/indices leading from the decoded JSON to the text
  delta, e.g. ``("choices", 0, "delta", "content")``.

``error_path`` optionally names a field whose presence means the vendor
reported a failure inside the stream.

Lines are expected to be whole (``httpx.Response.iter_lines`` buffers across
network chunk boundaries). A line that is not valid JSON is reported through
``on_malformed`` and skipped; it never ends the stream.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

PathElement = Union[str, int]


class StreamPayloadError(Exception):
    """Raised when a stream line carries a vendor-reported error."""


@dataclass(frozen=True)
class StreamFormat:
    """Decoding parameters for one vendor's streaming wire format."""

    name: str
    delta_path: Tuple[PathElement, ...]
    prefix: Optional[str] = None
    end_marker: Optional[str] = None
    error_path: Optional[Tuple[PathElement, ...]] = None


@dataclass(frozen=True)
class DecodedLine:
    """Outcome of decoding one line: a delta, the end marker, or nothing."""

    delta: Optional[str] = None
    done: bool = False


_NOTHING = DecodedLine()
_DONE = DecodedLine(done=True)


def extract_path(obj: Any, path: Iterable[PathElement]) -> Any:
    """Walk ``path`` through nested dicts/lists; ``None`` when any step is missing."""
    cur = obj
    for step in path:
        if isinstance(step, int):
            if not isinstance(cur, list) or not -len(cur) <= step < len(cur):
                return None
            cur = cur[step]
        else:
            if not isinstance(cur, dict):
                return None
            cur = cur.get(step)
        if cur is None:
            return None
    return cur


def decode_line(line: str, fmt: StreamFormat) -> DecodedLine:
    """Decode a single line according to ``fmt``.

    Raises:
        json.JSONDecodeError: the payload is not valid JSON.
        StreamPayloadError: the payload carries a vendor error field.
    """
    text = line.strip()
    if not text:
        return _NOTHING
    if fmt.prefix is not None:
        if not text.startswith(fmt.prefix):
            return _NOTHING
        text = text[len(fmt.prefix):].strip()
        if not text:
            return _NOTHING
    if fmt.end_marker is not None and text == fmt.end_marker:
        return _DONE
    payload = json.loads(text)
    if fmt.error_path is not None:
        err = extract_path(payload, fmt.error_path)
        if err:
            raise StreamPayloadError(str(err))
    delta = extract_path(payload, fmt.delta_path)
    if isinstance(delta, str) and delta:
        return DecodedLine(delta=delta)
    return _NOTHING


def iter_deltas(
    lines: Iterable[str],
    fmt: StreamFormat,
    *,
    on_malformed: Optional[Callable[[str, Exception], None]] = None,
) -> Iterator[str]:
    """Yield text deltas from ``lines`` until the end marker or exhaustion."""
    for line in lines:
        try:
            decoded = decode_line(line, fmt)
        except json.JSONDecodeError as e:
            if on_malformed is not None:
                on_malformed(line, e)
            continue
        if decoded.done:
            return
        if decoded.delta is not None:
            yield decoded.delta


# ---- Vendor formats --------------------------------------------------------

OLLAMA_NDJSON = StreamFormat(name="ollama", delta_path=("response",), error_path=("error",))
ANTHROPIC_SSE = StreamFormat(
    name="anthropic", delta_path=("delta", "text"), prefix="data:", end_marker="[DONE]"
)
COHERE_SSE = StreamFormat(name="cohere", delta_path=("text",), prefix="data:", end_marker="[DONE]")
OPENAI_SSE = StreamFormat(
    name="openai",
    delta_path=("choices", 0, "delta", "content"),
    prefix="data:",
    end_marker="[DONE]",
)
GEMINI_NDJSON = StreamFormat(
    name="gemini", delta_path=("candidates", 0, "content", "parts", 0, "text")
)
HUGGINGFACE_NDJSON = StreamFormat(name="huggingface", delta_path=(0, "generated_text"))


__all__ = [
    "StreamFormat",
    "DecodedLine",
    "StreamPayloadError",
    "extract_path",
    "decode_line",
    "iter_deltas",
    "OLLAMA_NDJSON",
    "ANTHROPIC_SSE",
    "COHERE_SSE",
    "OPENAI_SSE",
    "GEMINI_NDJSON",
    "HUGGINGFACE_NDJSON",
]
