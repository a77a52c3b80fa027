"""Unified timeout configuration for provider HTTP calls.

Vendors are called with no retry and no cancellation; the only bound on a
request is the transport timeout assembled here. Values are read from the
environment once and cached until the relevant variables change.

Supported environment variables (seconds, all optional):
    DEVAGENT_TIMEOUT_CONNECT_SECONDS   connection establishment (default 10)
    DEVAGENT_TIMEOUT_READ_SECONDS      gap between received bytes (default 120)
    DEVAGENT_TIMEOUT_WRITE_SECONDS     request upload (default 30)

A read value of ``0`` disables the read timeout, which lets a long stream
idle indefinitely between tokens.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

_ENV_NAMES = (
    "DEVAGENT_TIMEOUT_CONNECT_SECONDS",
    "DEVAGENT_TIMEOUT_READ_SECONDS",
    "DEVAGENT_TIMEOUT_WRITE_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Timeout for establishing the TCP/TLS session.
        read_timeout_seconds: Idle timeout between received chunks, ``None``
            for unbounded.
        write_timeout_seconds: Timeout for sending the request body.
    """

    connect_timeout_seconds: float = 10.0
    read_timeout_seconds: Optional[float] = 120.0
    write_timeout_seconds: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
            write=self.write_timeout_seconds,
            pool=self.connect_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float | None, *, allow_zero: bool = False) -> float | None:
    """Parse ``name`` as a positive float; ``0`` maps to ``None`` when allowed."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    if val == 0 and allow_zero:
        return None
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=float(_parse_env_float(_ENV_NAMES[0], 10.0) or 10.0),
        read_timeout_seconds=_parse_env_float(_ENV_NAMES[1], 120.0, allow_zero=True),
        write_timeout_seconds=float(_parse_env_float(_ENV_NAMES[2], 30.0) or 30.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
