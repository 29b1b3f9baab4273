"""Rue — a small HTTP router with ordered, first-match-wins routes.

Patterns are ``/``-separated. ``:name`` segments capture a path segment,
a trailing ``/`` or a ``...`` suffix makes a prefix route. Path captures,
form values, and the host labels are all read back with ``param()``.

Basic usage::

    from rue import App, Router, param

    router = Router()

    @router.handle_func("GET", "/hello/:name")
    def hello(request):
        return f"Hello, {param(request, 'name')} from {param(request, '_host')}!"

    App(router).run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "Params",
    "PayloadTooLarge",
    "Request",
    "Response",
    "Router",
    "RueError",
    "param",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import rue`` fast while providing a clean top-level API.
    """
    if name == "App":
        from rue.app import App

        return App

    if name == "AppConfig":
        from rue.config import AppConfig

        return AppConfig

    if name == "Router":
        from rue.routing.router import Router

        return Router

    if name in ("Params", "param"):
        from rue.routing import params

        return getattr(params, name)

    if name == "Request":
        from rue.http.request import Request

        return Request

    if name == "Response":
        from rue.http.response import Response

        return Response

    if name in ("RueError", "ConfigurationError", "HTTPError", "NotFound", "PayloadTooLarge"):
        from rue import errors

        return getattr(errors, name)

    msg = f"module 'rue' has no attribute {name!r}"
    raise AttributeError(msg)
