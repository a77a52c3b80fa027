"""
Anthropic provider package.

Exports:
- AnthropicProvider: Adapter implementing LLMProvider for Anthropic
"""

from .client import AnthropicProvider

__all__ = ["AnthropicProvider"]
