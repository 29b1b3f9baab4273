"""Tests for rue.http.headers — case-insensitive Headers."""

import pytest

from rue.http.headers import Headers


class TestHeaders:
    def test_case_insensitive_lookup(self) -> None:
        h = Headers(((b"Host", b"example.com"),))
        assert h["host"] == "example.com"
        assert h["HOST"] == "example.com"
        assert "Host" in h

    def test_missing(self) -> None:
        h = Headers()
        assert h.get("host") is None
        with pytest.raises(KeyError):
            h["host"]
        assert 42 not in h

    def test_multi_values(self) -> None:
        h = Headers(((b"x-tag", b"a"), (b"X-Tag", b"b")))
        assert h["x-tag"] == "a"
        assert h.get_list("x-tag") == ["a", "b"]
        assert len(h) == 1
        assert list(h) == ["x-tag"]

    def test_from_mapping(self) -> None:
        h = Headers.from_mapping({"Content-Type": "text/plain"})
        assert h["content-type"] == "text/plain"
