"""Streaming primitives for provider layer.

Keeps streaming concerns separate from the configuration DTOs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass
class ChatStreamEvent:
    """Represents an incremental delta from a streaming provider.

    Fields:
      provider: canonical provider name
      model: model id/name
      delta: textual delta (``None`` on the terminal event)
      finish: True on the final event
    """

    provider: str
    model: str
    delta: str | None
    finish: bool = False


def accumulate_text(events: Iterable[ChatStreamEvent]) -> str:
    """Concatenate the text deltas of a stream in arrival order."""
    return "".join(e.delta for e in events if e.delta)


__all__ = [
    "ChatStreamEvent",
    "accumulate_text",
]
