"""Providers Debugging CLI (package entrypoint).

This package wires argument parsing to action handlers kept in small, focused
modules. It performs no provider logic directly; it opens the settings store,
builds a :class:`ProviderDispatcher` over it, and runs one subcommand.

Public API re-exports:
- ``main``: CLI entrypoint callable (console script ``devagent-providers``)
"""

from __future__ import annotations

import sys
from typing import Optional

from ..dispatcher import ProviderDispatcher
from .cli_actions import HANDLERS, print_error
from .cli_parser import build_parser
from .settings import apply_logging, open_store


def main(argv: Optional[list[str]] = None) -> int:
	"""CLI entrypoint.

	Parameters
	----------
	argv: Optional[list[str]]
		Argument vector; when ``None`` uses ``sys.argv[1:]``.

	Returns
	-------
	int
		Process exit code (0 success, non-zero on error).
	"""
	p = build_parser()
	args = p.parse_args(list(sys.argv[1:] if argv is None else argv))
	if args.log_level or args.log_file:
		apply_logging(args.log_level, args.log_file)

	store = open_store(args.settings)
	dispatcher = ProviderDispatcher(store, notifier=print_error)
	return HANDLERS[args.cmd](args, dispatcher)


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
