"""Path-indexed site directory."""

from .store import SiteDirectory

__all__ = ["SiteDirectory"]
