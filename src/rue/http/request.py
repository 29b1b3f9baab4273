"""Immutable HTTP request.

Frozen metadata with async body access. The request is honest about
what it is: received data that doesn't change. Routing results are
attached by deriving a new request with ``with_params()``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field, replace
from typing import Any

from rue._internal.asgi import Receive, Scope
from rue.errors import PayloadTooLarge
from rue.http.forms import FormData, is_form_request, parse_form_data
from rue.http.headers import Headers
from rue.http.query import QueryParams
from rue.routing.params import Params

logger = logging.getLogger("rue.http")

DEFAULT_MAX_BODY_SIZE = 10 * 1024 * 1024


async def _empty_receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata (method, path, headers, etc.) is frozen at creation.
    Body is accessed asynchronously via ``.body()``, ``.text()``, ``.form()``.
    ``params`` holds the bindings made by the router for this request.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query: QueryParams = field(default_factory=QueryParams)
    params: Params = field(default_factory=Params)
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None
    max_body_size: int = DEFAULT_MAX_BODY_SIZE

    # Private: ASGI receive callable for body streaming
    _receive: Receive = field(default=_empty_receive, repr=False, compare=False)

    # Private: mutable cache for body and parsed form data, shared with
    # every request derived through with_params()
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def host(self) -> str:
        """The Host header, falling back to the ASGI server address.

        Kept verbatim, port included. Empty when neither is known.
        """
        host = self.headers.get("host")
        if host is not None:
            return host
        if self.server is not None:
            return self.server[0]
        return ""

    @property
    def host_prefix(self) -> str:
        """First dot-delimited label of ``host`` (``"api"`` for ``api.example.com``)."""
        return self.host.split(".", 1)[0]

    @property
    def url(self) -> str:
        """Request target (path + query string)."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    def param(self, key: str) -> str:
        """Return a routed parameter, or the empty string if unbound."""
        value = self.params.get(key)
        return "" if value is None else value

    def with_params(self, params: Params) -> Request:
        """Return a copy of this request bound to *params*."""
        return replace(self, params=params)

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached. The ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.

        Raises:
            PayloadTooLarge: If the declared Content-Length or the bytes
                received so far exceed ``max_body_size``. Reading stops
                at that point.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        if self._cache.get("_too_large"):
            raise PayloadTooLarge

        declared = _content_length(self.headers)
        if declared is not None and declared > self.max_body_size:
            self._cache["_too_large"] = True
            raise PayloadTooLarge

        chunks: list[bytes] = []
        total = 0
        while True:
            message = await self._receive()
            chunk = message.get("body", b"")
            total += len(chunk)
            if total > self.max_body_size:
                self._cache["_too_large"] = True
                raise PayloadTooLarge
            if chunk:
                chunks.append(chunk)
            if not message.get("more_body", False):
                break

        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    async def form(self) -> FormData:
        """Parse the body as URL-encoded form data.

        Only POST, PUT and PATCH requests with an
        ``application/x-www-form-urlencoded`` content type carry form
        values; any other request yields an empty ``FormData``. So do
        bodies over ``max_body_size`` and bodies that fail to decode:
        the failure is logged and routing goes on with what is available.

        Result is cached.
        """
        if "_form" in self._cache:
            return self._cache["_form"]

        result = FormData()
        if is_form_request(self.method, self.content_type):
            try:
                result = parse_form_data(await self.body(), self.content_type or "")
            except PayloadTooLarge:
                logger.debug(
                    "Ignoring form body over %d bytes for %s %s",
                    self.max_body_size, self.method, self.path,
                )
            except ValueError as exc:
                logger.debug("Ignoring malformed form body for %s %s: %s",
                             self.method, self.path, exc)

        self._cache["_form"] = result
        return result

    async def form_values(self) -> list[tuple[str, list[str]]]:
        """Body form values followed by query values, merged per key.

        Keys appear in first-seen order. A key present in both keeps its
        body values first, then its query values.
        """
        merged: dict[str, list[str]] = {}
        form = await self.form()
        for source in (form, self.query):
            for key, values in source.lists():
                merged.setdefault(key, []).extend(values)
        return list(merged.items())

    # -- Factory --

    @classmethod
    def from_asgi(
        cls,
        scope: Scope,
        receive: Receive,
        *,
        max_body_size: int = DEFAULT_MAX_BODY_SIZE,
    ) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            max_body_size=max_body_size,
            _receive=receive,
        )


def _content_length(headers: Headers) -> int | None:
    value = headers.get("content-length")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
