"""Connector errors and server diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NoReturn


class Error(RuntimeError):
    """Base class for connector errors."""


def throw_error(msg: str) -> NoReturn:
    """Raise an Error carrying the given message."""
    raise Error(msg)


class WarningLevel(IntEnum):
    """Kind of diagnostic reported by the server."""

    ERROR = 0
    WARNING = 1
    INFO = 2


_LEVEL_NAMES = {
    WarningLevel.ERROR: "Error",
    WarningLevel.WARNING: "Warning",
    WarningLevel.INFO: "Info",
}


@dataclass(frozen=True)
class Warning:  # noqa: A001 - the server's own name for a diagnostic
    """An error, warning or informational note reported by the server."""

    level: int
    code: int = 0
    message: str = ""

    def __str__(self) -> str:
        try:
            name = _LEVEL_NAMES[WarningLevel(self.level)]
        except ValueError:
            name = "<Unknown>"
        code = f" {self.code}" if self.code else ""
        return f"{name}{code}: {self.message}"