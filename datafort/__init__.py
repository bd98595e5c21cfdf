"""Flat-file site directory: parser, path-indexed store and navigation API."""

from .directory import SiteDirectory
from .errors import (
    DirectoryError,
    DirectoryParseError,
    DuplicatePathError,
    MalformedLineError,
    SiteNotFoundError,
)
from .ingest import FlatDirectoryParser, FlatParserConfig, parse_directory
from .models.metadata import DirectoryMetadata
from .models.site import Site

__all__ = [
    "DirectoryError",
    "DirectoryMetadata",
    "DirectoryParseError",
    "DuplicatePathError",
    "FlatDirectoryParser",
    "FlatParserConfig",
    "MalformedLineError",
    "Site",
    "SiteDirectory",
    "SiteNotFoundError",
    "parse_directory",
]
