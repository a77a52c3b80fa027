"""
Groq provider package.

Exports:
- GroqProvider: Adapter implementing LLMProvider for Groq
"""

from .client import GroqProvider

__all__ = ["GroqProvider"]
