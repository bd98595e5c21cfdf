from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from datafort.models.site import Site


class SiteSummary(BaseModel):
    name: str
    title: str | None = None
    url: str | None = None
    path: str
    is_leaf: bool
    child_count: int = 0

    @classmethod
    def from_site(cls, site: Site) -> "SiteSummary":
        return cls(
            name=site.name,
            title=site.title,
            url=site.url,
            path=site.path,
            is_leaf=site.is_leaf(),
            child_count=len(site.children),
        )


class Breadcrumb(BaseModel):
    name: str
    path: str


class SiteDetail(SiteSummary):
    description: str | None = None
    breadcrumbs: List[Breadcrumb] = Field(default_factory=list)
    children: List[SiteSummary] = Field(default_factory=list)

    @classmethod
    def from_site(cls, site: Site) -> "SiteDetail":
        base = SiteSummary.from_site(site)
        return cls(
            **base.model_dump(),
            description=site.description,
            breadcrumbs=[Breadcrumb(name=node.name, path=node.path) for node in site.lineage()],
            children=[SiteSummary.from_site(child) for child in site.children],
        )


class DirectoryView(BaseModel):
    """Landing view: directory metadata plus the root-level listing."""

    title: str | None = None
    splash: str | None = None
    roots: List[SiteSummary] = Field(default_factory=list)


__all__ = ["Breadcrumb", "DirectoryView", "SiteDetail", "SiteSummary"]
