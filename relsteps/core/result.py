"""Result type for explicit error handling.

Every step and collaborator in relsteps reports failure as a value instead
of raising, so the release sequence can stop at the first failed stage
without try/except blocks around each call.

Usage:
    def release(repo_id: str) -> Result[None, StepError]:
        if not repo_id:
            return Err(StepError(kind="invalid_config", message="empty repo id"))
        return Ok(None)

    match release("r1"):
        case Ok(_):
            console.success("released")
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def unwrap(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying an error payload."""

    error: E

    def unwrap(self) -> None:
        """Raises ValueError; callers check for Err first."""
        raise ValueError(f"called unwrap on Err: {self.error}")

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
