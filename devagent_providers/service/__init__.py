"""Session-level services: the provider dispatcher and the debugging CLI."""

from .dispatcher import Notifier, ProviderDispatcher

__all__ = ["ProviderDispatcher", "Notifier"]
