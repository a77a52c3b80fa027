"""Per-stream counters reported on the ``stream.end`` log event."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Timing and volume of one streaming call.

    Attributes:
        emitted: Number of non-empty deltas delivered.
        skipped_lines: Lines dropped because they failed to decode.
        time_to_first_token_ms: Latency until the first delta, if any.
        total_duration_ms: Wall time from request start to stream end.
    """

    emitted: int = 0
    skipped_lines: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    _t0: float = field(default_factory=time.perf_counter, repr=False)

    def _elapsed_ms(self) -> float:
        return (time.perf_counter() - self._t0) * 1000.0

    def record_delta(self) -> None:
        if self.time_to_first_token_ms is None:
            self.time_to_first_token_ms = self._elapsed_ms()
        self.emitted += 1

    def finish(self) -> None:
        self.total_duration_ms = self._elapsed_ms()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emitted_count": self.emitted,
            "skipped_lines": self.skipped_lines,
            "time_to_first_token_ms": self.time_to_first_token_ms,
            "total_duration_ms": self.total_duration_ms,
        }


__all__ = ["StreamMetrics"]
