"""CLI action handlers.

Purpose
-------
Subcommand handlers for the devagent-providers CLI, keeping the entrypoint
minimal (thin presentation layer). Every handler receives the parsed
arguments and a :class:`ProviderDispatcher` built over the CLI's settings
store, and returns a process exit code. This module has no top-level side
effects and is safe to import in tests.

Fallback & Error Semantics
--------------------------
- Provider failures are printed as JSON to stderr
  (``{"error": ..., "code": ...}``).
- Exit codes: ``0`` success, ``1`` provider/runtime failure, ``2`` usage or
  configuration problem (unknown provider, missing API key, unsupported).
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, Optional

from ...base.errors import ErrorCode, ProviderError
from ...base.interfaces import LLMProvider
from ...base.log_support import LogContext
from ...base.logging import get_logger, normalized_log_event
from ...base.models import ProviderKind
from ...config.env import get_env_var_candidates
from ..dispatcher import ProviderDispatcher

_CONFIG_ERRORS = {ErrorCode.MISSING_API_KEY, ErrorCode.UNSUPPORTED, ErrorCode.UNKNOWN_PROVIDER}

Handler = Callable[[argparse.Namespace, ProviderDispatcher], int]


def print_error(message: str, **fields: Any) -> None:
    """Write a one-line JSON error object to stderr."""
    print(json.dumps({"error": message, **fields}), file=sys.stderr)


def report_provider_error(err: ProviderError) -> int:
    """Print ``err`` and return the matching exit code."""
    payload: Dict[str, Any] = {"code": err.code.value, "provider": err.provider}
    if err.status is not None:
        payload["status"] = err.status
    if err.code is ErrorCode.MISSING_API_KEY:
        payload["set_one_of_env"] = list(get_env_var_candidates(err.provider))
    print_error(err.message, **payload)
    return 2 if err.code in _CONFIG_ERRORS else 1


def resolve_target(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> Optional[LLMProvider]:
    """Return the adapter named by ``--provider``, or the active one.

    Unknown names print an error and yield ``None``.
    """
    name = getattr(args, "provider", None)
    if not name:
        return dispatcher.active
    kind = ProviderKind.parse(name)
    if kind is None:
        print_error(f"unknown provider '{name}'", code=ErrorCode.UNKNOWN_PROVIDER.value)
        return None
    return dispatcher.get_provider(kind)


def handle_providers(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> int:
    """List every provider; the active one is prefixed with ``*``."""
    current = dispatcher.get_current_provider()
    for kind in ProviderKind:
        adapter = dispatcher.get_provider(kind)
        marker = "*" if kind.value == current else " "
        print(f"{marker} {kind.value:<12} {adapter.get_model()}")
    return 0


def handle_query(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> int:
    """Send a prompt; with ``--stream`` print deltas as they arrive."""
    adapter = resolve_target(args, dispatcher)
    if adapter is None:
        return 2
    logger = get_logger(f"cli.{adapter.provider_name}")
    ctx = LogContext(provider=adapter.provider_name, model=adapter.get_model())
    normalized_log_event(logger, "cli.start", ctx, phase="start", stream=bool(args.stream))

    def _write(delta: str) -> None:
        sys.stdout.write(delta)
        sys.stdout.flush()

    try:
        if args.stream:
            adapter.stream_response(args.prompt, _write)
            print()
        else:
            print(adapter.generate_response(args.prompt))
    except ProviderError as e:
        normalized_log_event(
            logger, "cli.error", ctx, phase="finalize", emitted=False, error_code=e.code.value, error=e.message
        )
        return report_provider_error(e)
    normalized_log_event(logger, "cli.finalize", ctx, phase="finalize", emitted=True)
    return 0


def handle_models(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> int:
    adapter = resolve_target(args, dispatcher)
    if adapter is None:
        return 2
    try:
        models = adapter.get_available_models()
    except ProviderError as e:
        return report_provider_error(e)
    for name in models:
        print(name)
    return 0


def handle_check(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> int:
    """Print availability as JSON; exit 1 when unavailable."""
    adapter = resolve_target(args, dispatcher)
    if adapter is None:
        return 2
    available = adapter.is_available()
    print(json.dumps({"provider": adapter.provider_name, "model": adapter.get_model(), "available": available}))
    return 0 if available else 1


def handle_set_model(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> int:
    adapter = resolve_target(args, dispatcher)
    if adapter is None:
        return 2
    adapter.set_model(args.model)
    print(json.dumps({"provider": adapter.provider_name, "model": adapter.get_model()}))
    return 0


def handle_set_key(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> int:
    adapter = resolve_target(args, dispatcher)
    if adapter is None:
        return 2
    try:
        adapter.set_api_key(args.api_key)
    except ProviderError as e:
        return report_provider_error(e)
    print(json.dumps({"provider": adapter.provider_name, "api_key_set": True}))
    return 0


def handle_use(args: argparse.Namespace, dispatcher: ProviderDispatcher) -> int:
    """Select the active provider; unknown names fall back to ollama and exit 2."""
    known = ProviderKind.parse(args.name) is not None
    kind = dispatcher.set_provider(args.name)
    print(json.dumps({"active_provider": kind.value}))
    return 0 if known else 2


HANDLERS: Dict[str, Handler] = {
    "providers": handle_providers,
    "query": handle_query,
    "models": handle_models,
    "check": handle_check,
    "set-model": handle_set_model,
    "set-key": handle_set_key,
    "use": handle_use,
}
