"""Settings store implementations.

The host editor owns the real settings store; the provider layer only talks to
it through the :class:`~devagent_providers.base.interfaces.SettingsStore`
protocol. Two implementations ship here:

* ``InMemorySettingsStore`` - process-local dict, used by tests and by callers
  that do not need persistence.
* ``JsonFileSettingsStore`` - a small JSON document on disk, used by the CLI
  as a stand-in for host settings. Writes replace the file atomically.

Layout (both stores)::

    {
      "": {"active_provider": "groq"},
      "groq": {"api_key": "...", "model": "mixtral-8x7b-32768"}
    }
"""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from ..base.interfaces import SettingsStore
from ..base.logging import get_logger


class InMemorySettingsStore:
    """Thread-safe dict-backed settings store."""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self._lock = threading.Lock()
        self._data: Dict[str, Dict[str, Any]] = {
            section: dict(values) for section, values in (initial or {}).items()
        }

    def get(self, section: str, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(section, {}).get(key, default)

    def update(self, section: str, key: str, value: Any) -> None:
        with self._lock:
            self._data.setdefault(section, {})[key] = value

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        with self._lock:
            return {section: dict(values) for section, values in self._data.items()}


class JsonFileSettingsStore(InMemorySettingsStore):
    """Settings persisted to a JSON file.

    The file is read once at construction; a missing or unreadable file starts
    empty (logged). Every ``update`` rewrites the whole document.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._logger = get_logger("config.settings")
        super().__init__(self._read())

    def _read(self) -> Dict[str, Dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self._logger.warning("settings file unreadable, starting empty: %s (%s)", self.path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, dict)}

    def update(self, section: str, key: str, value: Any) -> None:
        super().update(section, key, value)
        self._write()

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(self.as_dict(), indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self.path)


__all__ = ["SettingsStore", "InMemorySettingsStore", "JsonFileSettingsStore"]
