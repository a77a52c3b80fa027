"""
Mistral provider package.

Exports:
- MistralProvider: Adapter implementing LLMProvider for Mistral
"""

from .client import MistralProvider

__all__ = ["MistralProvider"]
