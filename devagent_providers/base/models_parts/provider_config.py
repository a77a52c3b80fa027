"""
ProviderConfig DTO owned by a single provider adapter.

The config is mutable (setters and configuration reloads write to it) but each
call works from an immutable :meth:`ProviderConfig.snapshot` taken at call
start, so a concurrent ``set_api_key`` never changes a request that is
already being built.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass
class ProviderConfig:
    """Connection settings for one vendor.

    Attributes:
        base_url: Endpoint URL (or URL prefix for vendors that append the
            model to the path).
        model: Model identifier sent with every request.
        api_key: Credential; ``None`` or empty means "not configured".
    """

    base_url: str
    model: str
    api_key: Optional[str] = None

    def has_api_key(self) -> bool:
        return bool((self.api_key or "").strip())

    def snapshot(self) -> "ProviderConfig":
        """Return an independent copy for the duration of one call."""
        return replace(self)

    def to_dict(self, *, mask_key: bool = True) -> Dict[str, Any]:
        key = self.api_key
        if mask_key and key:
            key = f"{key[:3]}***" if len(key) > 6 else "***"
        return {"base_url": self.base_url, "model": self.model, "api_key": key}


__all__ = ["ProviderConfig"]
