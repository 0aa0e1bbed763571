"""Tests for relsteps.core.result module."""

import pytest

from relsteps.core.result import Err, Ok, Result


def test_ok_unwrap() -> None:
    assert Ok(42).unwrap() == 42


def test_err_unwrap_raises() -> None:
    with pytest.raises(ValueError, match="called unwrap on Err: bad"):
        Err("bad").unwrap()


def test_equality_and_repr() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert repr(Ok("x")) == "Ok('x')"
    assert repr(Err("x")) == "Err('x')"


def test_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"

    assert describe(Ok(1)) == "ok 1"
    assert describe(Err("x")) == "err x"
