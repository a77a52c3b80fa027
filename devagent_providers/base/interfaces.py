"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports Protocols split into single-class modules under
``devagent_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import ChunkSink, LLMProvider, SettingsStore

__all__ = [
    "ChunkSink",
    "LLMProvider",
    "SettingsStore",
]
