from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional

from datafort.directory.store import SiteDirectory
from datafort.errors import MalformedLineError
from datafort.ingest.parser import DirectoryParser, ParserConfig
from datafort.models.metadata import DirectoryMetadata
from datafort.models.site import Site

logger = logging.getLogger(__name__)

_METADATA_KEYS = frozenset(item.name for item in fields(DirectoryMetadata))
_SITE_FIELD_COUNT = 4  # name, title, url, description


@dataclass(slots=True)
class FlatParserConfig(ParserConfig):
    """Configuration for the flat, separator-indented directory format."""

    separator: str = "\t"


@dataclass(slots=True)
class _DepthFrontier:
    """Per-parse record of the most recent site seen at each depth."""

    last_level: int = 0
    sites: Dict[int, Site] = field(default_factory=dict)

    def record(self, level: int, site: Site) -> None:
        for depth in [depth for depth in self.sites if depth > level]:
            del self.sites[depth]
        self.sites[level] = site
        self.last_level = level


class FlatDirectoryParser(DirectoryParser):
    """Parse flat ``<empty>*name<sep>title<sep>url<sep>description`` lines into a SiteDirectory.

    The number of leading empty fields on a data line is its depth. Lines without any
    separator are ``key=value`` metadata and never affect depth tracking.
    """

    config: FlatParserConfig

    def __init__(self, config: FlatParserConfig | None = None) -> None:
        super().__init__(config or FlatParserConfig())
        assert isinstance(self.config, FlatParserConfig)
        if not self.config.separator:
            raise ValueError("separator must be a non-empty string")

    def parse(self, text: str) -> SiteDirectory:
        directory = SiteDirectory()
        frontier = _DepthFrontier()
        parent: Optional[Site] = None

        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
            if self.config.separator not in line and not line.strip():
                continue

            columns = line.split(self.config.separator)
            if len(columns) == 1:
                self._apply_metadata(directory.metadata, line, line_number)
                continue

            level = _count_leading_empty(columns)
            site = _build_site(columns[level : level + _SITE_FIELD_COUNT], line_number, line)
            parent = self._resolve_parent(frontier, parent, level, line_number, line)
            frontier.record(level, site)

            if parent is not None:
                parent.attach(site)
            directory.add(site, line_number=line_number)

        logger.info("Parsed %d sites (%d at root level)", len(directory), len(directory.roots()))
        return directory

    def _resolve_parent(
        self,
        frontier: _DepthFrontier,
        current: Optional[Site],
        level: int,
        line_number: int,
        line: str,
    ) -> Optional[Site]:
        last_level = frontier.last_level
        if level > last_level + 1:
            raise MalformedLineError(
                line_number, line, f"jumps from depth {last_level} to depth {level}"
            )

        if level < last_level:
            if level == 0:
                logger.debug("Line %d: back at the root level", line_number)
                return None
            parent = frontier.sites.get(level - 1)
            if parent is not None:
                logger.debug(
                    "Line %d: moved up %d->%d, parent is now %s", line_number, last_level, level, parent.path
                )
        elif level > last_level:
            parent = frontier.sites.get(last_level)
            if parent is not None:
                logger.debug(
                    "Line %d: moved deeper %d->%d, parent is now %s", line_number, last_level, level, parent.path
                )
        else:
            return current

        if parent is None:
            raise MalformedLineError(line_number, line, f"no site recorded at depth {level - 1} to attach to")
        return parent

    def _apply_metadata(self, metadata: DirectoryMetadata, line: str, line_number: int) -> None:
        # The value may itself contain "=".
        key, _, value = line.partition("=")
        if key not in _METADATA_KEYS:
            logger.debug("Line %d: ignoring unknown metadata key %r", line_number, key)
            return
        setattr(metadata, key, value)


def _count_leading_empty(columns: List[str]) -> int:
    level = 0
    for column in columns:
        if column:
            break
        level += 1
    return level


def _build_site(values: List[str], line_number: int, line: str) -> Site:
    if not values:
        raise MalformedLineError(line_number, line, "data line has no site name")
    name = values[0]
    if not name.strip():
        raise MalformedLineError(line_number, line, "site name is blank")

    def optional(index: int) -> Optional[str]:
        if index < len(values) and values[index]:
            return values[index]
        return None

    return Site(name=name, title=optional(1), url=optional(2), description=optional(3))


def parse_directory(text: str, separator: str = "\t") -> SiteDirectory:
    """Parse flat directory source text with the given field separator."""

    return FlatDirectoryParser(FlatParserConfig(separator=separator)).parse(text)


__all__ = ["FlatDirectoryParser", "FlatParserConfig", "parse_directory"]
