from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

PATH_SEPARATOR = "."


@dataclass(slots=True, eq=False)
class Site:
    """A directory entry: a leaf when it carries a URL, a group otherwise."""

    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    parent: Optional["Site"] = field(default=None, repr=False)
    children: List["Site"] = field(default_factory=list, repr=False)

    @property
    def segments(self) -> List[str]:
        """Names from this site up to its root, e.g. ``["game", "wowhead", "retripal"]``."""

        segments: List[str] = []
        node: Optional[Site] = self
        while node is not None:
            segments.append(node.name)
            node = node.parent
        return segments

    @property
    def path(self) -> str:
        """Canonical lookup key, e.g. ``game.wowhead.retripal``."""

        return PATH_SEPARATOR.join(self.segments)

    @property
    def depth(self) -> int:
        return len(self.segments) - 1

    def is_leaf(self) -> bool:
        return self.url is not None

    def is_group(self) -> bool:
        return self.url is None

    def is_root(self) -> bool:
        return self.parent is None

    def has_children(self) -> bool:
        return bool(self.children)

    def lineage(self) -> List["Site"]:
        """Sites from the root down to (and including) this one."""

        chain: List[Site] = []
        node: Optional[Site] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    def attach(self, child: "Site") -> None:
        """Append ``child`` and point its parent back at this site."""

        if child.parent is not None:
            raise ValueError(f"Site {child.name!r} is already attached to {child.parent.path!r}")
        if any(node is child for node in self.lineage()):
            raise ValueError(f"Attaching {child.name!r} under {self.path!r} would create a cycle")
        self.children.append(child)
        child.parent = self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "path": self.path,
            "children": [child.to_dict() for child in self.children],
        }


__all__ = ["PATH_SEPARATOR", "Site"]
