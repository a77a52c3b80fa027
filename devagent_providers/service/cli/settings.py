"""Persistent CLI settings location and logging setup.

Purpose
-------
The CLI stands in for the host editor: provider configuration and the active
provider selector live in a :class:`JsonFileSettingsStore`. The file is stored
under the user's configuration directory using the XDG spec where available,
falling back to ``~/.config/devagent_providers/settings.json``. Log files
default to the XDG state directory (``$XDG_STATE_HOME``) or
``~/.local/state/devagent_providers``.

Public API
----------
- ``default_settings_path()``: resolve the settings file path.
- ``open_store(path)``: open the JSON settings store.
- ``apply_logging(level, log_file)``: configure the shared logger.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ...base.logging import configure_logger
from ...config.settings import JsonFileSettingsStore

CONFIG_DIR_NAME = "devagent_providers"
CONFIG_FILE_NAME = "settings.json"
DEFAULT_LOG_FILE = "devagent_providers.log"


def _xdg_config_dir() -> Path:
    """Return the XDG-compliant configuration directory for this app.

    Resolution order follows the XDG spec: use the ``XDG_CONFIG_HOME``
    environment variable if set and non-empty; otherwise fall back to
    ``~/.config``. The final directory path is ``<config_root>/devagent_providers``.
    """
    root = os.environ.get("XDG_CONFIG_HOME")
    base = Path(root).expanduser() if root else Path.home() / ".config"
    return base / CONFIG_DIR_NAME


def _xdg_state_dir() -> Path:
    """Return the XDG-compliant state directory for this app."""
    root = os.environ.get("XDG_STATE_HOME")
    base = Path(root).expanduser() if root else Path.home() / ".local" / "state"
    return base / CONFIG_DIR_NAME


def default_settings_path() -> Path:
    """Return ``DEVAGENT_SETTINGS_FILE`` when set, else the XDG settings file."""
    override = os.environ.get("DEVAGENT_SETTINGS_FILE")
    if override:
        return Path(override).expanduser()
    return _xdg_config_dir() / CONFIG_FILE_NAME


def default_log_path() -> Path:
    return _xdg_state_dir() / DEFAULT_LOG_FILE


def open_store(path: Optional[str | Path] = None) -> JsonFileSettingsStore:
    """Open the settings store at ``path`` (default: :func:`default_settings_path`)."""
    return JsonFileSettingsStore(Path(path) if path else default_settings_path())


def apply_logging(level: Optional[str], log_file: Optional[str] = None) -> None:
    """Apply the requested level and optional file handler to the shared logger."""
    configure_logger(level=level, file_path=log_file)


__all__ = [
    "default_settings_path",
    "default_log_path",
    "open_store",
    "apply_logging",
]
