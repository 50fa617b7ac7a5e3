"""
Core building blocks: parsing, location resolution and contrast analysis.

The orchestrating ``AuditEngine`` lives in ``a11ycheck.engine.engine``; it
depends on the rule catalogue, which in turn depends on this package.
"""

from .contrast import contrast_ratio, parse_color, relative_luminance
from .document import parse_document
from .location import line_at, resolve_line

__all__ = [
    "contrast_ratio",
    "line_at",
    "parse_color",
    "parse_document",
    "relative_luminance",
    "resolve_line",
]
