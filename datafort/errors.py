from __future__ import annotations

from typing import Optional


class DirectoryError(Exception):
    """Base class for every failure raised while building or querying a directory."""


class DirectoryParseError(DirectoryError):
    """Raised when a source line cannot be turned into part of a consistent tree."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason} ({line!r})")


class MalformedLineError(DirectoryParseError):
    """A data line without a name, or one whose depth has no parent to attach to."""


class DuplicatePathError(DirectoryError):
    def __init__(self, path: str, line_number: Optional[int] = None) -> None:
        self.path = path
        self.line_number = line_number
        location = f"Line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}site path {path!r} is already registered")


class SiteNotFoundError(DirectoryError, KeyError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"Expected to find site with path {self.path!r}"


__all__ = [
    "DirectoryError",
    "DirectoryParseError",
    "DuplicatePathError",
    "MalformedLineError",
    "SiteNotFoundError",
]
