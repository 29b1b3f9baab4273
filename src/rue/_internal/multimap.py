"""Multi-valued mappings — the shared protocol and the ordered base class.

``MultiValueMapping`` lets handlers accept Headers, QueryParams, FormData
or Params without coupling to the concrete type. ``MultiDict`` is the
ordered implementation behind QueryParams and FormData.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns a single logical value for a key.
    ``get_list`` returns all raw values for a key.

    Structurally compatible with ``Mapping[str, str]`` plus ``get_list``.
    Defined with explicit dunder methods because Protocols cannot
    inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


class MultiDict(Mapping[str, str]):
    """Immutable ordered multi-valued mapping built from ``(key, value)`` pairs.

    Keys keep first-seen order; values keep the order the pairs arrived in.
    Shared base for ``QueryParams`` and ``FormData``.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        data: dict[str, list[str]] = {}
        for key, value in pairs:
            data.setdefault(key, []).append(value)
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"{type(self).__name__}({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def lists(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(key, values)`` in first-seen key order."""
        for key, values in self._data.items():
            yield key, list(values)
