"""Server startup on pounce.

Development mode runs a single worker with reload; production mode
runs ``workers`` workers (0 = one per CPU).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rue.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given rue App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but rue has a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (rue App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes. Forces one worker.
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle so
            that code changes on disk take effect immediately.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = app.config
    if reload:
        server_config = ServerConfig(
            host=host,
            port=port,
            workers=1,
            reload=True,
            reload_include=config.reload_include,
            reload_dirs=config.reload_dirs,
            log_level=config.log_level,
        )
    else:
        server_config = ServerConfig(
            host=host,
            port=port,
            workers=config.workers,
            log_level=config.log_level,
        )
    server = Server(server_config, app, app_path=app_path)
    server.run()
