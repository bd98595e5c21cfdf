"""Read-only navigation API over the site directory."""

from .router import router, get_directory, load_directory, reset_directory

__all__ = ["router", "get_directory", "load_directory", "reset_directory"]
