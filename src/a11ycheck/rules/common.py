"""
Shared node queries for rule implementations.
"""

from __future__ import annotations

from typing import Optional, Set

from bs4 import BeautifulSoup
from bs4.element import Tag

from a11ycheck.engine.location import resolve_line
from a11ycheck.protocols import Diagnostic, DiagnosticKind

FORM_CONTROLS = ["input", "select", "textarea", "button", "meter", "output", "progress"]


def attr(tag: Tag, name: str) -> Optional[str]:
    """Attribute value as a string, or None when absent.

    bs4 splits a few attributes (``class``, ``rel``...) into lists; those are
    joined back so every rule sees plain text.
    """
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def visible_text(tag: Tag) -> str:
    return tag.get_text(" ", strip=True)


def accessible_text(tag: Tag) -> str:
    """Visible text plus the alt text of contained images."""
    parts = [visible_text(tag)]
    for img in tag.find_all("img"):
        alt = attr(img, "alt")
        if alt and alt.strip():
            parts.append(alt.strip())
    return " ".join(p for p in parts if p)


def has_aria_name(tag: Tag) -> bool:
    """True for a non-empty ``aria-label`` or any ``aria-labelledby``."""
    label = attr(tag, "aria-label")
    if label is not None and label.strip():
        return True
    return attr(tag, "aria-labelledby") is not None


def document_ids(document: BeautifulSoup) -> Set[str]:
    return {attr(tag, "id") or "" for tag in document.find_all(id=True)}


def label_targets(document: BeautifulSoup) -> Set[str]:
    """Identifiers referenced by ``<label for=...>``."""
    targets = set()
    for label in document.find_all("label"):
        target = attr(label, "for")
        if target:
            targets.add(target)
    return targets


def make_diagnostic(source: str, label: str, node: Tag, kind: DiagnosticKind, message: str) -> Diagnostic:
    return Diagnostic(label=label, line=resolve_line(source, node), kind=kind, message=message)
