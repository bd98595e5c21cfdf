from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class DirectoryMetadata:
    """Free-form values declared by ``key=value`` lines in the source."""

    title: Optional[str] = None
    splash: Optional[str] = None


__all__ = ["DirectoryMetadata"]
