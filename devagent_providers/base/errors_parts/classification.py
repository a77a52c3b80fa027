"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Adapters call :func:`to_provider_error` at their HTTP boundary so that every
failure leaving a provider is a :class:`ProviderError`. ``httpx`` status
errors become ``HTTP_ERROR`` (with status and reason phrase), transport
failures become ``TRANSPORT`` before a response exists and ``STREAM_ERROR``
once a streamed body is being consumed.
"""
from __future__ import annotations

from typing import Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_exception(exc: Exception, *, mid_stream: bool = False) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. HTTP status (``httpx.HTTPStatusError`` or any ``.response``).
        3. ``httpx`` transport/stream errors (and unusable URLs).
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if _extract_status(exc) is not None:
        return ErrorCode.HTTP_ERROR
    if isinstance(exc, (httpx.TransportError, httpx.StreamError, httpx.InvalidURL)):
        return ErrorCode.STREAM_ERROR if mid_stream else ErrorCode.TRANSPORT
    return ErrorCode.UNKNOWN


def to_provider_error(
    exc: Exception,
    *,
    provider: str,
    model: Optional[str],
    mid_stream: bool = False,
) -> ProviderError:
    """Wrap ``exc`` in a :class:`ProviderError` (identity for ProviderError)."""
    if isinstance(exc, ProviderError):
        return exc
    code = classify_exception(exc, mid_stream=mid_stream)
    status = _extract_status(exc)
    status_text = None
    if status is not None:
        resp = getattr(exc, "response", None)
        status_text = getattr(resp, "reason_phrase", None) or None
        message = f"{provider} API error: {status} {status_text or ''}".rstrip()
    elif code is ErrorCode.STREAM_ERROR:
        message = f"Stream error: {exc}"
    else:
        message = f"{provider} API error: {exc}"
    return ProviderError(
        code=code,
        message=message,
        provider=provider,
        model=model,
        status=status,
        status_text=status_text,
        raw=exc,
    )


__all__ = [
    "classify_exception",
    "to_provider_error",
    "_extract_status",
]
