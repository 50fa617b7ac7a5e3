"""Where documents come from: the local filesystem or the web."""

from .discovery import discover_files
from .fetcher import PageFetcher, is_url

__all__ = ["PageFetcher", "discover_files", "is_url"]
