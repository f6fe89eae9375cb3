"""Unit tests for kernel types – Result."""

from __future__ import annotations

import pytest

from retrykit.kernel.types import Err, Ok


class TestOk:
    def test_is_ok(self) -> None:
        r = Ok(1)
        assert r.is_ok()
        assert not r.is_err()

    def test_unwrap(self) -> None:
        assert Ok("v").unwrap() == "v"

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(1).unwrap_or(2) == 1

    def test_map(self) -> None:
        assert Ok(2).map(lambda v: v * 10) == Ok(20)

    def test_equality_and_hash(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)
        assert hash(Ok("a")) == hash(Ok("a"))

    def test_none_is_a_valid_value(self) -> None:
        assert Ok(None).is_ok()
        assert Ok(None).value is None


class TestErr:
    def test_is_err(self) -> None:
        r = Err(ValueError("x"))
        assert r.is_err()
        assert not r.is_ok()

    def test_unwrap_raises_error(self) -> None:
        error = ValueError("boom")
        with pytest.raises(ValueError) as info:
            Err(error).unwrap()
        assert info.value is error

    def test_unwrap_or_returns_default(self) -> None:
        assert Err(ValueError()).unwrap_or(5) == 5

    def test_map_is_noop(self) -> None:
        r = Err(ValueError())
        assert r.map(lambda v: v) is r

    def test_equality_by_identity(self) -> None:
        error = ValueError("x")
        assert Err(error) == Err(error)
        assert Err(error) != Err(ValueError("x"))

    def test_ok_never_equals_err(self) -> None:
        assert Ok(None) != Err(ValueError())
