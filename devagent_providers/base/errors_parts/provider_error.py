"""
Structured provider error exception type.

Wraps vendor HTTP failures and local precondition failures with a normalized
`ErrorCode` so callers can branch on the failure kind without parsing text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for notifications.
        provider: Provider key where the error originated (e.g., ``"groq"``).
        model: Optional model name associated with the failure.
        status: HTTP status code for ``HTTP_ERROR`` failures.
        status_text: HTTP reason phrase for ``HTTP_ERROR`` failures.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    status: Optional[int] = None
    status_text: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
