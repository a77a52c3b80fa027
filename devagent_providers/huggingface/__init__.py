"""
Hugging Face provider package.

Exports:
- HuggingFaceProvider: Adapter implementing LLMProvider for Hugging Face
"""

from .client import HuggingFaceProvider

__all__ = ["HuggingFaceProvider"]
