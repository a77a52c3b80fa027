"""CLI parser construction for devagent-providers.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ...base.factory import ProviderFactory


def _add_provider_flag(parser: argparse.ArgumentParser) -> None:
    """Attach ``--provider`` (defaults to the active provider from settings)."""
    parser.add_argument(
        "--provider",
        default=None,
        help=f"one of {', '.join(ProviderFactory.supported())}; default: the active provider",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    This function performs no side effects and wires only argument shapes.
    """
    p = argparse.ArgumentParser(
        prog="devagent-providers",
        description="Multi-provider LLM client debugging CLI",
    )
    p.add_argument("--settings", default=None, help="settings JSON file (default: XDG config dir)")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    p.add_argument("--log-file", default=None, help="also write JSON logs to this file")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("providers", help="List providers, marking the active one")

    p_query = sub.add_parser("query", help="Send a prompt and print the response")
    p_query.add_argument("prompt")
    _add_provider_flag(p_query)
    p_query.add_argument("--stream", action="store_true", help="print deltas as they arrive")

    p_models = sub.add_parser("models", help="List models offered by a provider")
    _add_provider_flag(p_models)

    p_check = sub.add_parser("check", help="Check whether a provider is reachable")
    _add_provider_flag(p_check)

    p_model = sub.add_parser("set-model", help="Persist the model for a provider")
    p_model.add_argument("model")
    _add_provider_flag(p_model)

    p_key = sub.add_parser("set-key", help="Persist the API key for a provider")
    p_key.add_argument("api_key")
    _add_provider_flag(p_key)

    p_use = sub.add_parser("use", help="Select the active provider")
    p_use.add_argument("name")

    return p
