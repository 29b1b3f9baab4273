"""ASGI application — serves a Router.

The router holds the routes; the App is the ASGI 3.0 callable a server
talks to. It freezes the route table before the first request so that
dispatch can run concurrently without locks.
"""

import threading
from collections.abc import Callable
from typing import Any

from rue._internal.asgi import Receive, Scope, Send
from rue._internal.invoke import invoke
from rue.config import AppConfig
from rue.routing.router import Router
from rue.server.handler import handle_request


class App:
    """The ASGI entry point for a rue Router.

    Usage::

        router = Router()
        router.handle("GET", "/hello/:name", hello)

        app = App(router, AppConfig(debug=True))
        app.run()
    """

    __slots__ = ("_freeze_lock", "_shutdown_hooks", "_startup_hooks", "config", "router")

    def __init__(self, router: Router | None = None, config: AppConfig | None = None) -> None:
        self.router: Router = router if router is not None else Router()
        self.config: AppConfig = config or AppConfig()
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._freeze_lock = threading.Lock()

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async function run at lifespan startup."""
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async function run at lifespan shutdown."""
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (reloading single worker when ``config.debug``).

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from rue.server.dev import run_server

        self._ensure_frozen()
        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler. Other scope types are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            handler=self.router,
            debug=self.config.debug,
            max_body_size=self.config.max_content_length,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the router at startup (before first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await _run_hooks(self._startup_hooks)
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await _run_hooks(self._shutdown_hooks)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Freeze the router exactly once, even with concurrent first requests."""
        if self.router.frozen:
            return
        with self._freeze_lock:
            if not self.router.frozen:
                self.router.freeze()


async def _run_hooks(hooks: list[Callable[..., Any]]) -> None:
    for hook in hooks:
        await invoke(hook)
