"""``rue run`` — start a pounce server for a resolved App."""

import argparse
import sys

from rue.cli._resolve import reload_target, resolve_app
from rue.errors import ConfigurationError


def run_command(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it, CLI flags overriding the app config."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from rue.server.dev import run_server

    reload = args.reload or app.config.debug
    run_server(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        reload=reload,
        app_path=reload_target(args.app) if reload else None,
    )
