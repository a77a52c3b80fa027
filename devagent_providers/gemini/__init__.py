"""
Gemini provider package.

Exports:
- GeminiProvider: Adapter implementing LLMProvider for Gemini
"""

from .client import GeminiProvider

__all__ = ["GeminiProvider"]
