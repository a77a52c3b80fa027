"""Unified provider error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``devagent_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, to_provider_error

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "to_provider_error"]
