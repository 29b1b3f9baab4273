"""Route, PathSegment and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from rue._internal.types import Handler
from rue.routing.params import Params

# Method sentinel matching every request method
ANY_METHOD = "*"

PARAM_MARKER = ":"
PREFIX_MARKER = "..."


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:  ``users``      (compared verbatim)
    Param:    ``:id``        (is_param=True, param_name="id")
    Prefix:   ``files...``   (is_prefix=True, prefix_value="files")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    is_prefix: bool = False
    prefix_value: str = ""

    @classmethod
    def parse(cls, value: str) -> "PathSegment":
        if value.startswith(PARAM_MARKER):
            return cls(value, is_param=True, param_name=value[len(PARAM_MARKER) :])
        if value.endswith(PREFIX_MARKER):
            return cls(value, is_prefix=True, prefix_value=value[: -len(PREFIX_MARKER)])
        return cls(value)


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled ``(method, pattern, handler)`` registration.

    ``segments`` is computed once by the router when the route is
    registered and never recomputed per request.
    """

    method: str
    pattern: str
    segments: tuple[PathSegment, ...]
    handler: Handler
    prefix: bool = False

    def allows(self, method: str) -> bool:
        """Whether this route accepts the already-lowercased *method*."""
        return self.method == method or self.method == ANY_METHOD

    def match(self, segments: list[str], params: Params) -> Params | None:
        """Match request path *segments*, binding captures on top of *params*.

        Returns the extended chain on success and ``None`` otherwise.
        *params* itself is never modified, so a failed match leaves no
        partial captures behind.

        A ``...`` segment matches immediately once the request segment
        starts with its prefix. When the prefix test fails the segment is
        still compared as a literal, ``...`` included, and so never matches.
        """
        if len(segments) > len(self.segments) and not self.prefix:
            return None

        bound = params
        for i, seg in enumerate(self.segments):
            if i > len(segments) - 1:
                return None
            if seg.is_param:
                bound = bound.bind(seg.param_name or "", segments[i])
                continue
            if seg.is_prefix and segments[i].startswith(seg.prefix_value):
                return bound
            if seg.value != segments[i]:
                return None
        return bound


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: Params
