"""Utility modules for a11ycheck."""

from .atomic import atomic_write_json

__all__ = ["atomic_write_json"]
