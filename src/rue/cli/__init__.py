"""Rue CLI — serve an app from an import string.

Entry point registered as ``rue`` in ``pyproject.toml``::

    [project.scripts]
    rue = "rue.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``rue`` command."""
    parser = argparse.ArgumentParser(
        prog="rue",
        description="Rue: a small ordered HTTP router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- rue run ----------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve an App or Router")
    run_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app or myapp:router)",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Single worker with auto-reload (default when the app config has debug=True)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from rue.cli._run import run_command

        run_command(args)
