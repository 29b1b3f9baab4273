"""Rue exception hierarchy.

Shared across Router, App, handlers, and the ASGI edge so every module
raises and catches the same types. "No route matched" is not an error:
it is what triggers ``Router.not_found``.
"""

from dataclasses import dataclass


class RueError(Exception):
    """Base for all rue-specific errors."""


class ConfigurationError(RueError):
    """Raised when app configuration or an import string is invalid."""


@dataclass(frozen=True, slots=True)
class HTTPError(RueError):
    """An error that maps directly to an HTTP status code.

    Handlers may raise it to short-circuit with a status. The ASGI edge
    catches it and answers with ``status``, ``detail`` and ``headers``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: nothing is served at the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class PayloadTooLarge(HTTPError):  # noqa: N818
    """413: the request body is larger than the app accepts."""

    def __init__(self, detail: str = "Payload Too Large") -> None:
        super().__init__(status=413, detail=detail)
