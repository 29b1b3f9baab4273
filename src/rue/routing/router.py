"""Ordered router with first-match-wins dispatch.

Routes are tried in registration order. The first route whose method
matches (or is ``"*"``) and whose pattern matches the path wins, no
matter how specific later routes are: register specific routes before
general prefix routes.
"""

import logging
from collections.abc import Callable

from rue._internal.invoke import invoke
from rue._internal.types import Handler
from rue.http.request import Request
from rue.http.response import Response
from rue.routing.params import FQDN_KEY, HOST_KEY, Params
from rue.routing.route import PREFIX_MARKER, PathSegment, Route, RouteMatch

logger = logging.getLogger("rue.routing")

NOT_FOUND_TEXT = "404 page not found"


def split_path(path: str) -> list[str]:
    """Split a path or pattern into segments.

    Leading and trailing slashes are insignificant. The root path, and
    the empty string, split into a single empty segment::

        "/users/42/" -> ["users", "42"]
        "/"          -> [""]
    """
    return path.strip("/").split("/")


def parse_path(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a route pattern into segments.

    Examples::

        "/users"           -> (PathSegment("users"),)
        "/users/:id"       -> (PathSegment("users"), PathSegment(":id", is_param=True, ...))
        "/static/files..." -> (PathSegment("static"), PathSegment("files...", is_prefix=True, ...))
    """
    return tuple(PathSegment.parse(part) for part in split_path(pattern))


def not_found_handler(request: Request) -> Response:
    """Default ``Router.not_found``: a plain-text 404."""
    return Response(NOT_FOUND_TEXT, status=404)


class Router:
    """Ordered list of routes plus a not-found fallback.

    Usage::

        router = Router()
        router.handle("GET", "/items/:id", show_item)

        @router.handle_func("*", "/static/")
        def static(request):
            ...

        response = await router.serve_http(request)

    A ``Router`` is itself a handler, so it can be registered on another
    router under a prefix pattern.
    """

    __slots__ = ("_frozen", "_routes", "not_found")

    def __init__(self, not_found: Handler | None = None) -> None:
        self._routes: list[Route] = []
        self._frozen = False
        # Handler called when no route matches; settable after construction
        self.not_found: Handler = not_found or not_found_handler

    # -- Registration --

    def handle(self, method: str, pattern: str, handler: Handler) -> None:
        """Add a handler for *method* and *pattern*.

        *method* is any HTTP method, case-insensitive, or ``"*"`` for all
        methods. *pattern* segments starting with ``:`` capture the
        request segment under that name. A pattern ending in ``/`` or
        ``...`` matches as a prefix. Duplicates are not rejected; the
        first registration shadows later ones.
        """
        if self._frozen:
            msg = "Cannot add routes after the router is frozen."
            raise RuntimeError(msg)

        route = Route(
            method=method.lower(),
            pattern=pattern,
            segments=parse_path(pattern),
            handler=handler,
            prefix=pattern.endswith("/") or pattern.endswith(PREFIX_MARKER),
        )
        self._routes.append(route)
        logger.debug("Registered %s %s (prefix=%s)", route.method, pattern, route.prefix)

    def handle_func(
        self,
        method: str,
        pattern: str,
        fn: Handler | None = None,
    ) -> Callable[[Handler], Handler] | Handler:
        """Register a plain function, directly or as a decorator.

        ::

            router.handle_func("GET", "/", index)

            @router.handle_func("POST", "/items")
            async def create(request): ...
        """
        if fn is not None:
            self.handle(method, pattern, fn)
            return fn

        def decorator(func: Handler) -> Handler:
            self.handle(method, pattern, func)
            return func

        return decorator

    def freeze(self) -> None:
        """Stop accepting routes. Called by ``App`` before serving."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes, in match order."""
        return tuple(self._routes)

    # -- Matching --

    def _match_segments(
        self,
        method: str,
        segments: list[str],
        params: Params,
    ) -> RouteMatch | None:
        for route in self._routes:
            if not route.allows(method):
                continue
            bound = route.match(segments, params)
            if bound is not None:
                return RouteMatch(route=route, params=bound)
        return None

    def match(self, method: str, path: str, params: Params | None = None) -> RouteMatch | None:
        """Return the first route matching *method* and *path*, or ``None``.

        Only path captures are bound; form values and host labels are
        merged by ``serve_http``.
        """
        return self._match_segments(method.lower(), split_path(path), params or Params())

    # -- Dispatch --

    async def serve_http(self, request: Request) -> object:
        """Dispatch *request* to the first matching route's handler.

        The handler receives a request whose ``params`` hold, in binding
        order, the path captures, the form values (URL-encoded body, then
        query string) and ``_host``/``_fqdn``. A later binding of the same
        key wins. Without a match, ``not_found`` gets the request as is.
        """
        match = self._match_segments(
            request.method.lower(), split_path(request.path), request.params
        )
        if match is None:
            logger.debug("No route for %s %s", request.method, request.path)
            return await invoke(self.not_found, request)

        params = match.params.bind_all(await request.form_values())
        params = params.bind(HOST_KEY, request.host_prefix).bind(FQDN_KEY, request.host)

        logger.debug(
            "Matched %s %s -> %s %s",
            request.method, request.path, match.route.method, match.route.pattern,
        )
        return await invoke(match.route.handler, request.with_params(params))

    async def __call__(self, request: Request) -> object:
        return await self.serve_http(request)
