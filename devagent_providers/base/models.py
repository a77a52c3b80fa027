"""
Provider-agnostic domain models public surface.

Re-exports the one-class-per-file implementations under
``devagent_providers.base.models_parts``.
"""

from .models_parts.provider_config import ProviderConfig
from .models_parts.provider_kind import DEFAULT_PROVIDER_KIND, ProviderKind

__all__ = [
    "ProviderConfig",
    "ProviderKind",
    "DEFAULT_PROVIDER_KIND",
]
