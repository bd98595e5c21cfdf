from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from datafort.directory.store import SiteDirectory
from datafort.errors import DirectoryError, SiteNotFoundError
from datafort.ingest.flat import FlatDirectoryParser, FlatParserConfig
from datafort.server.settings import Settings, get_settings
from .models import DirectoryView, SiteDetail, SiteSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/navigation", tags=["navigation"])


def load_directory(settings: Settings) -> SiteDirectory:
    parser = FlatDirectoryParser(FlatParserConfig(separator=settings.field_separator))
    directory = parser.parse_file(settings.source_path)
    logger.info("Loaded directory from %s (%d sites)", settings.source_path, len(directory))
    return directory


def _resolve_directory(settings: Settings) -> SiteDirectory:
    global _DIRECTORY
    if _DIRECTORY is None:
        try:
            _DIRECTORY = load_directory(settings)
        except FileNotFoundError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        except DirectoryError as exc:
            logger.error("Failed to load directory from %s: %s", settings.source_path, exc)
            raise HTTPException(status_code=500, detail=f"Directory source is malformed: {exc}") from exc
    return _DIRECTORY


def get_directory(settings: Settings = Depends(get_settings)) -> SiteDirectory:
    return _resolve_directory(settings)


def reset_directory() -> None:
    """Forget the loaded directory so the next request re-reads the source."""

    global _DIRECTORY
    _DIRECTORY = None


_DIRECTORY: SiteDirectory | None = None


@router.get("", response_model=DirectoryView)
def get_navigation(directory: SiteDirectory = Depends(get_directory)) -> DirectoryView:
    return DirectoryView(
        title=directory.metadata.title,
        splash=directory.metadata.splash,
        roots=[SiteSummary.from_site(site) for site in directory.roots()],
    )


@router.get("/dump")
def dump_directory(directory: SiteDirectory = Depends(get_directory)) -> Dict[str, Any]:
    return {"sites": directory.dump()}


@router.get("/sites/{site_path}", response_model=SiteDetail)
def get_site(site_path: str, directory: SiteDirectory = Depends(get_directory)) -> SiteDetail:
    try:
        site = directory.find(site_path)
    except SiteNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return SiteDetail.from_site(site)


__all__ = ["router", "get_directory", "load_directory", "reset_directory"]
