"""Unit tests for kernel Result type."""

from __future__ import annotations

import pytest

from mongo_event_store.kernel.types import Err, Ok


class TestOk:
    def test_is_ok(self) -> None:
        result = Ok(1)
        assert result.is_ok()
        assert not result.is_err()

    def test_unwrap(self) -> None:
        assert Ok("v").unwrap() == "v"
        assert Ok("v").unwrap_or("d") == "v"

    def test_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3) == Ok(6)

    def test_equality(self) -> None:
        assert Ok(None) == Ok(None)
        assert Ok(1) != Ok(2)

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="unwrap_err"):
            Ok(1).unwrap_err()


class TestErr:
    def test_is_err(self) -> None:
        result = Err(ValueError("x"))
        assert result.is_err()
        assert not result.is_ok()

    def test_unwrap_raises_carried_error(self) -> None:
        error = ValueError("boom")
        with pytest.raises(ValueError, match="boom") as exc_info:
            Err(error).unwrap()
        assert exc_info.value is error

    def test_unwrap_or_returns_default(self) -> None:
        assert Err(ValueError()).unwrap_or("d") == "d"

    def test_unwrap_err_returns_error(self) -> None:
        error = KeyError("k")
        assert Err(error).unwrap_err() is error

    def test_map_is_noop(self) -> None:
        result = Err(ValueError())
        assert result.map(lambda x: x) is result

    def test_pattern_matching(self) -> None:
        match Err(KeyError("k")):
            case Ok():
                pytest.fail("expected Err")
            case Err(error=KeyError() as error):
                assert error.args == ("k",)
