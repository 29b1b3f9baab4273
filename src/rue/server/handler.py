"""ASGI handler — translates ASGI scope/messages to rue types.

The only component that touches raw HTTP ASGI messages. Converts the
scope to a typed Request, dispatches it through the router, and sends
the normalized Response back through ASGI send().
"""

import logging
import traceback
from typing import Any

from rue._internal.asgi import Receive, Scope, Send
from rue._internal.invoke import invoke
from rue.errors import HTTPError
from rue.http.request import DEFAULT_MAX_BODY_SIZE, Request
from rue.http.response import Response, to_response
from rue.server.sender import send_response

logger = logging.getLogger("rue.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    handler: Any,
    debug: bool = False,
    max_body_size: int = DEFAULT_MAX_BODY_SIZE,
) -> None:
    """Process a single HTTP request through *handler* (usually a Router)."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive, max_body_size=max_body_size)

    try:
        response = to_response(await invoke(handler, request))
    except HTTPError as exc:
        response = http_error_response(exc)
    except Exception as exc:
        response = internal_error_response(exc, request, debug=debug)

    await send_response(response, send)


def http_error_response(exc: HTTPError) -> Response:
    """Answer a handler-raised ``HTTPError`` with its own status."""
    response = Response(exc.detail or str(exc.status), status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def internal_error_response(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Log an unhandled handler error and answer with a 500.

    The traceback is included in the body only in debug mode.
    """
    logger.exception("Unhandled error in %s %s", request.method, request.path)
    body = "Internal Server Error"
    if debug:
        body = f"{body}\n\n{''.join(traceback.format_exception(exc))}"
    return Response(body, status=500)
