"""Invoke helpers — call sync or async handlers uniformly.

Rue handlers can be ``def`` or ``async def``, and a ``Router`` is itself
a handler. Any code that calls a registered handler goes through this
module so the sync/async check lives in exactly one place.

Usage::

    from rue._internal.invoke import invoke

    result = await invoke(handler, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync: returns immediately, no await needed
        def health(request):
            return "ok"

        # async: returns coroutine, awaited automatically
        async def item(request):
            row = await db.fetch(param(request, "id"))
            return Response(row.name)
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
