"""Request builders and recording handlers shared by the rue test suite."""

from collections.abc import Callable
from typing import Any

from rue.http.headers import Headers
from rue.http.query import QueryParams
from rue.http.request import Request


def make_receive(*bodies: bytes) -> Callable[[], Any]:
    """Create an ASGI receive callable that yields bodies."""
    messages = []
    for i, body in enumerate(bodies):
        is_last = i == len(bodies) - 1
        messages.append({"type": "http.request", "body": body, "more_body": not is_last})
    if not messages:
        messages.append({"type": "http.request", "body": b"", "more_body": False})
    it = iter(messages)

    async def receive() -> dict[str, Any]:
        return next(it)

    return receive


def make_request(
    method: str = "GET",
    target: str = "/",
    *,
    headers: dict[str, str] | None = None,
    body: bytes = b"",
    max_body_size: int = 10 * 1024 * 1024,
) -> Request:
    """Build a Request the way the ASGI edge would, from a request target."""
    path, _, query_string = target.partition("?")
    return Request(
        method=method,
        path=path,
        headers=Headers.from_mapping(headers or {}),
        query=QueryParams(query_string.encode("latin-1")),
        max_body_size=max_body_size,
        _receive=make_receive(body),
    )


class Recorder:
    """A handler that remembers the requests it was called with."""

    def __init__(self, result: object = "ok") -> None:
        self.calls: list[Request] = []
        self.result = result

    def __call__(self, request: Request) -> object:
        self.calls.append(request)
        return self.result

    @property
    def request(self) -> Request:
        assert len(self.calls) == 1
        return self.calls[0]
