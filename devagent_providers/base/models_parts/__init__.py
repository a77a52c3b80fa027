"""Model parts package: one-class-per-file DTOs re-exported by ``base.models``."""

from .provider_config import ProviderConfig
from .provider_kind import DEFAULT_PROVIDER_KIND, ProviderKind

__all__ = ["ProviderConfig", "ProviderKind", "DEFAULT_PROVIDER_KIND"]
