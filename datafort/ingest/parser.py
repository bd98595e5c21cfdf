from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from datafort.directory.store import SiteDirectory


@dataclass(slots=True)
class ParserConfig:
    """Configuration shared by every directory source parser."""

    encoding: str = "utf-8"


class DirectoryParser(ABC):
    """Abstract base class for turning raw source text into a SiteDirectory."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    @abstractmethod
    def parse(self, text: str) -> SiteDirectory:
        """Parse the whole source text and return a fully indexed directory."""

    def parse_file(self, source_path: Path) -> SiteDirectory:
        if not source_path.exists():
            raise FileNotFoundError(f"Directory source not found: {source_path}")
        return self.parse(source_path.read_text(encoding=self.config.encoding))

    def parse_many(self, paths: Iterable[Path]) -> Iterator[SiteDirectory]:
        """Utility for parsing several sources with the same configuration."""

        for path in paths:
            yield self.parse_file(path)


__all__ = ["DirectoryParser", "ParserConfig"]
