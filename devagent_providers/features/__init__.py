"""Caller-facing features built on the provider dispatcher."""

from .assistant import CodeAssistant
from .prompts import REFACTOR_TYPES, parse_generated_files

__all__ = ["CodeAssistant", "REFACTOR_TYPES", "parse_generated_files"]
