"""App import resolution — resolves ``"module:attribute"`` strings to App instances."""

import importlib

from rue.app import App
from rue.errors import ConfigurationError
from rue.routing.router import Router


def resolve_app(import_string: str) -> App:
    """Resolve an import string to a rue App instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    A ``Router`` is wrapped in an ``App`` with the default config. Any
    other callable is treated as a factory and called once.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        ConfigurationError: If the object is not an App, a Router, or a
            factory returning one of them.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (App, Router)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise ConfigurationError(msg) from exc

    if isinstance(obj, Router):
        return App(obj)
    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a rue App or Router"
        raise ConfigurationError(msg)

    return obj


def reload_target(import_string: str) -> str | None:
    """Return *import_string* if pounce can re-import it on reload, else ``None``.

    Pounce re-imports the ``"module:attribute"`` string on every reload and
    serves the result as an ASGI app. That only works when the attribute is
    an ``App`` instance: a bare module name is rejected by pounce, a
    ``Router`` is not an ASGI callable, and a factory would be called with
    the ASGI arguments. Those targets reload without an import string.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not module_path or not attr_name:
        return None
    obj = getattr(importlib.import_module(module_path), attr_name, None)
    return import_string if isinstance(obj, App) else None
