"""Error types for til.

Every failure the note core can report is a flat subclass of
:class:`NoteError`. Each carries just enough context (a path or a short
subject) for the CLI to print a useful one-line message.
"""

from __future__ import annotations

from pathlib import Path


class TilError(Exception):
    """Base exception for all til errors."""

    def __init__(self, message: str, *, context: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigError(TilError):
    """Raised when configuration cannot be loaded or validated."""


class NoteError(TilError):
    """Base for failures while resolving or writing a note file."""


class CannotFindDir(NoteError):
    def __init__(self, which: str) -> None:
        super().__init__(f"Cannot find {which} directory", context={"which": which})
        self.which = which


class CannotBuildPath(NoteError):
    def __init__(self, reason: str) -> None:
        super().__init__("Cannot build note path", context={"reason": reason})
        self.reason = reason


class CannotCreateDir(NoteError):
    def __init__(self, path: Path) -> None:
        super().__init__("Cannot create directory", context={"path": path})
        self.path = path


class CannotOpenOrCreatePath(NoteError):
    def __init__(self, path: Path) -> None:
        super().__init__("Cannot open or create note file", context={"path": path})
        self.path = path


class CannotReadFile(NoteError):
    def __init__(self, path: Path) -> None:
        super().__init__("Cannot read note file", context={"path": path})
        self.path = path


class CannotParseMetaData(NoteError):
    """The header delimiter or its ``tags:`` line is missing or malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__("Cannot parse note metadata", context={"reason": reason})
        self.reason = reason


class CannotWriteToFile(NoteError):
    def __init__(self, path: Path) -> None:
        super().__init__("Cannot write to note file", context={"path": path})
        self.path = path


__all__ = [
    "TilError",
    "ConfigError",
    "NoteError",
    "CannotFindDir",
    "CannotBuildPath",
    "CannotCreateDir",
    "CannotOpenOrCreatePath",
    "CannotReadFile",
    "CannotParseMetaData",
    "CannotWriteToFile",
]
