"""
Maps matched elements back to line numbers in the original source.

The primary strategy re-serializes the element and searches for the first
literal occurrence of that fragment in the source text. Parser
normalization (``<img>`` written back as ``<img/>``, entity re-escaping)
can make the fragment unrecoverable; the resolver then falls back to the
line the parser recorded while tokenizing, and finally to line 1. It never
raises.
"""

from __future__ import annotations

from bs4.element import Tag


def line_at(source: str, offset: int) -> int:
    """1-based line number of ``offset`` in ``source``."""
    if offset <= 0:
        return 1
    return source.count("\n", 0, offset) + 1


def resolve_line(source: str, node: Tag) -> int:
    """Return the 1-based line of ``node``'s first literal occurrence in ``source``."""
    fragment = str(node)
    if fragment:
        offset = source.find(fragment)
        if offset >= 0:
            return line_at(source, offset)

    recorded = getattr(node, "sourceline", None)
    if isinstance(recorded, int) and recorded >= 1:
        return recorded
    return 1
