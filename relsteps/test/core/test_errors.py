"""Tests for relsteps.core.errors module."""

from relsteps.core.errors import ErrorCode


def test_exit_code_values_are_stable() -> None:
    assert [(c.name, int(c)) for c in ErrorCode] == [
        ("OK", 0),
        ("USER_ERROR", 1),
        ("ENV_ERROR", 2),
        ("STAGE_ERROR", 3),
        ("NETWORK_ERROR", 4),
    ]
