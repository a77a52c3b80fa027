"""
Ollama provider package.

Exports:
- OllamaProvider: Adapter implementing LLMProvider for Ollama
"""

from .client import OllamaProvider

__all__ = ["OllamaProvider"]
