"""Base structured logging utilities for the provider layer.

One shared ``devagent_providers`` logger writes JSON lines to stderr; module
loggers (``devagent_providers.anthropic`` and so on) propagate to it instead
of carrying handlers of their own. ``normalized_log_event`` guarantees a
common key set (``phase``, ``emitted``, ``error_code``) on every provider
event so lines from different vendors can be filtered the same way.

Environment:
    DEVAGENT_LOG_LEVEL  DEBUG | INFO | WARNING | ERROR | CRITICAL
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "devagent_providers"

_BASE_LOGGER_ATTR = "_devagent_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_devagent_console_handler"
_FILE_HANDLER_ATTR = "_devagent_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Level set through configure_logger; wins over DEVAGENT_LOG_LEVEL.
_level_override: Optional[int] = None


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name case-insensitively, falling back to ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared base logger (idempotent)."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if _level_override is not None:
        desired_level = _level_override
    else:
        desired_level = _parse_level(os.getenv("DEVAGENT_LOG_LEVEL"), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            existing.setLevel(desired_level)
            # Follow sys.stderr when it is swapped (pytest capsys); the old stream may be closed.
            if isinstance(existing, logging.StreamHandler) and existing.stream is not sys.stderr:
                with contextlib.suppress(ValueError, OSError):
                    existing.flush()
                existing.stream = sys.stderr
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the shared base logger.

    The base logger is configured on first use; children carry no handlers
    and propagate to it.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        When given, attach (or retarget) a rotating file handler writing to
        this path. When ``None``, any file handler previously attached by this
        function is removed. Handlers attached by callers are left alone.
    json_mode:
        JSON formatter when ``True``, plain text otherwise.
    """
    global _level_override
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        _level_override = resolved
        logger.setLevel(resolved)
        for h in logger.handlers:
            h.setLevel(resolved)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path:
            existing = h  # type: ignore[assignment]
        else:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()

    if existing is None:
        # 5 MB x 3 backups
        fh = RotatingFileHandler(abs_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_make_formatter(json_mode))
        existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a single structured log line ``{"event": ..., **ctx, **fields}``.

    Keys whose value is ``None`` are dropped unless ``keep_none`` is set.
    """
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "emitted")


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    emitted: int | bool | None = None,
    error_code: str | None = None,
    level: int | None = None,
    **extra_fields: Any,
) -> None:
    """Emit a provider event carrying the normalized key set.

    ``phase`` and ``emitted`` are always present (``emitted`` may be null);
    ``error_code`` is present only for failures, which are logged at WARNING
    unless ``level`` says otherwise.
    """
    base_fields: dict[str, Any] = {"phase": phase, "emitted": emitted}
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    if level is None:
        level = logging.WARNING if error_code is not None else logging.INFO
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
