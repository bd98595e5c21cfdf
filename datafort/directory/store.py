from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional, Tuple

from datafort.errors import DuplicatePathError, SiteNotFoundError
from datafort.models.metadata import DirectoryMetadata
from datafort.models.site import Site


class SiteDirectory:
    """Owns a parsed forest of sites and indexes every site by its canonical path."""

    def __init__(self, metadata: Optional[DirectoryMetadata] = None) -> None:
        self.metadata = metadata or DirectoryMetadata()
        self._roots: List[Site] = []
        self._index: Dict[str, Site] = {}

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, path: object) -> bool:
        return path in self._index

    def roots(self) -> Tuple[Site, ...]:
        return tuple(self._roots)

    def paths(self) -> List[str]:
        return list(self._index)

    def add(self, site: Site, *, line_number: Optional[int] = None) -> None:
        """Register ``site`` under its current path.

        Parentless sites become roots. Sites with a parent must already have been
        attached by the caller; the directory never performs attachment itself.
        """

        path = site.path
        if path in self._index:
            raise DuplicatePathError(path, line_number=line_number)
        if site.is_root():
            self._roots.append(site)
        self._index[path] = site

    def find(self, path: str) -> Site:
        site = self._index.get(path)
        if site is None:
            raise SiteNotFoundError(path)
        return site

    def walk(self) -> Iterator[Site]:
        """Yield every site in pre-order, roots first, children in input order."""

        for root in self._roots:
            yield from self._walk_sites(root)

    def _walk_sites(self, site: Site) -> Iterator[Site]:
        yield site
        for child in site.children:
            yield from self._walk_sites(child)

    def dump(self) -> List[Dict[str, Any]]:
        return [root.to_dict() for root in self._roots]

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.dump(), indent=indent, ensure_ascii=False)


__all__ = ["SiteDirectory"]
