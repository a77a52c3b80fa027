"""Typed parameter object for provider adapter initialization.

Purpose
-------
Provide a small, provider-agnostic DTO that captures the initialization
parameters every adapter accepts. This keeps the factory boundary stable and
lets callers (CLI, host integrations) validate input before an adapter exists.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no I/O side effects. ``pydantic.ValidationError`` is
  raised for wrong types or an ``api_url`` that is not http(s).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    provider:
        Canonical provider name (e.g., ``"groq"``). Optional; the factory
        receives the provider name separately and drops this field.
    model:
        Model identifier overriding every configuration layer.
    api_key:
        API key or token; ignored by adapters that take no credentials.
    api_url:
        Endpoint override (proxies, self-hosted gateways, a remote Ollama).
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    api_key: Optional[str] = None
    api_url: Optional[str] = None

    @field_validator("provider", "model", "api_key", "api_url")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("api_url")
    @classmethod
    def _http_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.startswith(("http://", "https://")):
            raise ValueError("api_url must start with http:// or https://")
        return value


__all__ = ["AdapterParams"]
