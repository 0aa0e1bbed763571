"""Error payload shared by every release step and collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

StepErrorKind = Literal[
    "invalid_config",
    "command_failed",
    "repo_release_failed",
    "version_bump_failed",
    "chart_push_failed",
    "pr_create_failed",
    "pr_not_merged",
    "image_promotion_failed",
    "image_tag_failed",
    "sync_timeout",
    "sync_failed",
    "discovery_failed",
]


@dataclass(frozen=True, slots=True)
class StepError:
    """A hard stage failure.

    Returning one of these from a stage aborts the rest of the release.
    """

    kind: StepErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
