"""Interfaces parts package: single-class Protocol modules."""

from .llm_provider import ChunkSink, LLMProvider
from .settings_store import SettingsStore

__all__ = ["ChunkSink", "LLMProvider", "SettingsStore"]
