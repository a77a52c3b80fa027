"""
Cohere provider package.

Exports:
- CohereProvider: Adapter implementing LLMProvider for Cohere
"""

from .client import CohereProvider

__all__ = ["CohereProvider"]
