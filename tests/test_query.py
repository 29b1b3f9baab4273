"""Tests for rue.http.query — immutable QueryParams."""

import pytest

from rue._internal.multimap import MultiValueMapping
from rue.http.query import QueryParams


class TestQueryParams:
    def test_getitem(self) -> None:
        q = QueryParams(b"q=hello&page=2")
        assert q["q"] == "hello"
        assert q["page"] == "2"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            QueryParams(b"q=hello")["missing"]

    def test_keys_in_first_seen_order(self) -> None:
        q = QueryParams(b"b=1&a=2&b=3")
        assert list(q) == ["b", "a"]

    def test_get_list_keeps_order(self) -> None:
        q = QueryParams(b"tag=python&q=hello&tag=rust")
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_list("missing") == []

    def test_lists(self) -> None:
        q = QueryParams(b"z=a&y=1&z=b")
        assert list(q.lists()) == [("z", ["a", "b"]), ("y", ["1"])]

    def test_percent_decoding(self) -> None:
        q = QueryParams(b"name=J%C3%BCrgen&sp=a+b")
        assert q["name"] == "Jürgen"
        assert q["sp"] == "a b"

    def test_blank_value_preserved(self) -> None:
        assert QueryParams(b"flag=")["flag"] == ""

    def test_empty(self) -> None:
        q = QueryParams(b"")
        assert len(q) == 0
        assert q.raw == b""

    def test_satisfies_multivalue_protocol(self) -> None:
        assert isinstance(QueryParams(), MultiValueMapping)
