"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from relsteps.core.errors import ErrorCode
from relsteps.core.result import Err, Result
from relsteps.output.console import Style
from relsteps.steps.errors import StepError

if TYPE_CHECKING:
    from relsteps.cli.context import CLIContext

T = TypeVar("T")


def error_code_for(error: StepError) -> ErrorCode:
    if error.kind == "invalid_config":
        return ErrorCode.USER_ERROR
    if error.kind in ("sync_failed", "sync_timeout"):
        return ErrorCode.NETWORK_ERROR
    return ErrorCode.STAGE_ERROR


def exit_on_error(result: Result[T, StepError], ctx: CLIContext) -> None:
    """Print the error and exit with its code if result is Err."""
    if isinstance(result, Err):
        error = result.error
        ctx.console.error(error.message)
        if error.hint:
            ctx.console.print(f"hint: {error.hint}", Style.DIM)
        raise typer.Exit(code=int(error_code_for(error)))
