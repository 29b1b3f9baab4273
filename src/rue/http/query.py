"""Immutable query string parameters.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
Pair order is kept, so repeated keys read back in the order they were sent.
"""

from urllib.parse import parse_qsl

from rue._internal.multimap import MultiDict


class QueryParams(MultiDict):
    """Immutable query string parameters.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    __slots__ = ("_raw",)

    _raw: bytes

    def __init__(self, query_string: bytes = b"") -> None:
        super().__init__(parse_qsl(query_string.decode("latin-1"), keep_blank_values=True))
        object.__setattr__(self, "_raw", query_string)

    @property
    def raw(self) -> bytes:
        """The undecoded query string."""
        return self._raw
