"""Tests for rue.routing.params — immutable Params chain and param()."""

import pytest

from rue._internal.multimap import MultiValueMapping
from rue.routing.params import FQDN_KEY, HOST_KEY, Params, param

from helpers import make_request


class TestParams:
    def test_empty(self) -> None:
        params = Params()
        assert len(params) == 0
        assert list(params) == []
        assert "x" not in params

    def test_bind_returns_new_chain(self) -> None:
        empty = Params()
        bound = empty.bind("id", "42")
        assert bound["id"] == "42"
        assert "id" not in empty

    def test_multi_values_join_with_semicolon(self) -> None:
        params = Params().bind("z", "a", "b")
        assert params["z"] == "a;b"
        assert params.get_list("z") == ["a", "b"]

    def test_newest_binding_wins(self) -> None:
        params = Params().bind("id", "path").bind("id", "form")
        assert params["id"] == "form"
        assert len(params) == 1

    def test_iteration_is_oldest_first(self) -> None:
        params = Params().bind("a", "1").bind("b", "2").bind("a", "3")
        assert list(params) == ["a", "b"]
        assert dict(params) == {"a": "3", "b": "2"}

    def test_bind_all(self) -> None:
        params = Params().bind_all([("q", ["foo"]), ("z", ["a", "b"])])
        assert params["q"] == "foo"
        assert params["z"] == "a;b"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            Params()["missing"]

    def test_get_default(self) -> None:
        assert Params().get("missing") is None
        assert Params().get("missing", "fallback") == "fallback"
        assert Params().get_list("missing") == []

    def test_immutable(self) -> None:
        params = Params().bind("a", "1")
        with pytest.raises(AttributeError):
            params._key = "b"  # type: ignore[misc]

    def test_satisfies_multivalue_protocol(self) -> None:
        assert isinstance(Params(), MultiValueMapping)

    def test_repr(self) -> None:
        assert repr(Params().bind("a", "1")) == "Params({'a': '1'})"


class TestParam:
    def test_from_params(self) -> None:
        assert param(Params().bind("id", "123"), "id") == "123"

    def test_missing_is_empty_string(self) -> None:
        assert param(Params(), "nope") == ""

    def test_from_request(self) -> None:
        request = make_request().with_params(Params().bind("id", "7"))
        assert param(request, "id") == "7"
        assert request.param("id") == "7"
        assert request.param("nope") == ""

    def test_repeated_reads_are_stable(self) -> None:
        request = make_request().with_params(Params().bind("z", "a", "b"))
        assert param(request, "z") == param(request, "z") == "a;b"

    def test_implicit_key_names(self) -> None:
        assert HOST_KEY == "_host"
        assert FQDN_KEY == "_fqdn"
