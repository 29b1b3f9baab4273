"""Request-scoped parameter bindings.

Path captures, form values and the host labels of one request live in a
``Params`` chain: an immutable association list where every ``bind()``
returns a new head and the newest binding of a key shadows older ones.
Nothing is shared between requests, so concurrent dispatch needs no locks.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rue.http.request import Request

# Raw values bound under one key read back joined with this separator
VALUE_SEPARATOR = ";"

# Implicit keys bound by the router on every matched request
HOST_KEY = "_host"
FQDN_KEY = "_fqdn"


class Params(Mapping[str, str]):
    """Immutable chain of ``key -> values`` bindings.

    Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
    ``__getitem__`` returns the raw values of the newest binding joined
    with ``;``. ``get_list`` returns them unjoined.

    ``Params()`` is the empty chain::

        params = Params().bind("id", "42").bind("z", "a", "b")
        params["id"]          # "42"
        params["z"]           # "a;b"
        params.get_list("z")  # ["a", "b"]
    """

    __slots__ = ("_key", "_parent", "_values")

    def __init__(
        self,
        parent: "Params | None" = None,
        key: str | None = None,
        values: tuple[str, ...] = (),
    ) -> None:
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_values", values)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Params is immutable; use bind() to derive a new chain"
        raise AttributeError(msg)

    def bind(self, key: str, *values: str) -> "Params":
        """Return a new chain with *key* bound to *values* on top of this one."""
        return Params(self, key, tuple(values))

    def bind_all(self, items: Iterable[tuple[str, Sequence[str]]]) -> "Params":
        """Bind every ``(key, values)`` pair in order and return the new head."""
        head = self
        for key, values in items:
            head = head.bind(key, *values)
        return head

    def _lookup(self, key: str) -> tuple[str, ...] | None:
        node: Params | None = self
        while node is not None:
            if node._key == key:
                return node._values
            node = node._parent
        return None

    def _keys_newest_first(self) -> Iterator[str]:
        node: Params | None = self
        while node is not None:
            if node._key is not None:
                yield node._key
            node = node._parent

    def __getitem__(self, key: str) -> str:
        values = self._lookup(key)
        if values is None:
            raise KeyError(key)
        return VALUE_SEPARATOR.join(values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._lookup(key) is not None

    def __iter__(self) -> Iterator[str]:
        # Oldest binding first, each key once
        return iter(dict.fromkeys(reversed(list(self._keys_newest_first()))))

    def __len__(self) -> int:
        return len(set(self._keys_newest_first()))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Params({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the joined value for *key*, or *default* if unbound."""
        values = self._lookup(key)
        if values is None:
            return default
        return VALUE_SEPARATOR.join(values)

    def get_list(self, key: str) -> list[str]:
        """Return the raw values of the newest binding of *key*."""
        return list(self._lookup(key) or ())


def param(source: "Request | Params", key: str) -> str:
    """Return a request parameter, or the empty string if it is not bound.

    The parameter can be a path capture, a form value (query string or
    URL-encoded body), ``_host`` (first label of the Host header) or
    ``_fqdn`` (the whole Host header). Multiple values for the same key
    come back joined with ``;``.

    *source* is the ``Request`` handed to the handler, or its ``Params``::

        def show(request):
            item_id = param(request, "id")
    """
    params = source if isinstance(source, Params) else source.params
    value = params.get(key)
    return "" if value is None else value
