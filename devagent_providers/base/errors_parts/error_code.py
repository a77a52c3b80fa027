"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration raised by provider adapters and the
dispatcher. Values are lowercase snake_case and are considered a stable
public contract for logging and user-facing notifications.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    MISSING_API_KEY = "missing_api_key"
    HTTP_ERROR = "http_error"
    MALFORMED_RESPONSE = "malformed_response"
    STREAM_ERROR = "stream_error"
    TRANSPORT = "transport"
    UNKNOWN_PROVIDER = "unknown_provider"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
