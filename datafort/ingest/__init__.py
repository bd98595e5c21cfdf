"""Parsers that turn raw directory sources into SiteDirectory trees."""

from .parser import DirectoryParser, ParserConfig
from .flat import FlatDirectoryParser, FlatParserConfig, parse_directory

__all__ = [
    "DirectoryParser",
    "ParserConfig",
    "FlatDirectoryParser",
    "FlatParserConfig",
    "parse_directory",
]
