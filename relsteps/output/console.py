"""Console output for release steps.

Steps report progress, skipped stages and soft failures through
ConsoleProtocol rather than printing directly. The CLI plugs in RichConsole;
tests plug in MockConsole and assert on what was recorded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    DIM = auto()  # echoed collaborator commands
    HEADER = auto()  # stage banners

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Sink for step output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None:
        """Report a recoverable condition, such as a skipped stage."""
        ...

    def header(self, message: str) -> None:
        """Announce the start of a stage."""
        ...


class RichConsole:
    """Console implementation backed by rich.

    Messages are printed with markup disabled so that repository ids, image
    names and command lines containing brackets are shown verbatim.
    """

    _STYLES = {
        Style.DEFAULT: "",
        Style.SUCCESS: "green",
        Style.ERROR: "red bold",
        Style.WARNING: "yellow",
        Style.DIM: "dim",
        Style.HEADER: "blue bold",
    }

    def __init__(self) -> None:
        from rich.console import Console

        self._console = Console(highlight=False)

    def _labelled(self, label: str, style: Style, message: str) -> None:
        self._console.print(f"{label} ", style=self._STYLES[style], end="", markup=False)
        self._console.print(message, markup=False)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._console.print(message, style=self._STYLES[style] or None, markup=False)

    def success(self, message: str) -> None:
        self._labelled("OK", Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labelled("error:", Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._labelled("warning:", Style.WARNING, message)

    def header(self, message: str) -> None:
        self._console.print()
        self._console.print(message, style=self._STYLES[Style.HEADER], markup=False)


@dataclass
class OutputRecord:
    """A single line captured by MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that records output instead of printing it."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.print(f"OK {message}", Style.SUCCESS)

    def error(self, message: str) -> None:
        self.print(f"error: {message}", Style.ERROR)

    def warning(self, message: str) -> None:
        self.print(f"warning: {message}", Style.WARNING)

    def header(self, message: str) -> None:
        self.print(message, Style.HEADER)

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def warnings(self) -> list[str]:
        return [o.message for o in self.outputs if o.style == Style.WARNING]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return bool(self.warnings)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
