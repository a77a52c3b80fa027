"""SettingsStore Protocol (single-class module).

Boundary to the host's settings persistence. Adapters read their
``api_url`` / ``api_key`` / ``model`` entries at construction and on reload,
and write back on every setter call. Sections are provider names; the global
selector lives in the ``""`` section under ``active_provider``.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class SettingsStore(Protocol):
    """Key/value settings grouped by section."""

    def get(self, section: str, key: str, default: Optional[Any] = None) -> Any:
        """Return the stored value or ``default`` when unset."""
        ...

    def update(self, section: str, key: str, value: Any) -> None:
        """Persist ``value`` immediately."""
        ...
