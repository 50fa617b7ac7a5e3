"""
Image alternative text classification.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from a11ycheck.engine.location import resolve_line
from a11ycheck.protocols import Diagnostic, DiagnosticKind

from .common import attr

ALT_MAX_LENGTH = 30
DECORATIVE_ROLES = {"presentation", "none"}
FUNCTIONAL_CONTAINERS = ["a", "button"]

ALT_MESSAGES = {
    DiagnosticKind.MISSING_ALT: "<img> is missing an alt attribute",
    DiagnosticKind.ALT_DECORATIVE_INCORRECT: "Decorative <img> should have an empty alt attribute",
    DiagnosticKind.ALT_FUNCTIONAL_EMPTY: "<img> inside a link or button needs alt text describing its action",
    DiagnosticKind.ALT_EMPTY: "<img> has an empty alt attribute",
}


def classify_alt(alt: Optional[str], role: Optional[str], functional: bool) -> Tuple[Optional[DiagnosticKind], bool]:
    """Classify one image.

    Returns the emptiness-class finding (first match wins, or None) and
    whether the alt text is too long. The length check needs non-empty
    trimmed text, so it never coincides with an empty-alt finding.
    """
    if alt is None:
        return DiagnosticKind.MISSING_ALT, False

    trimmed = alt.strip()
    decorative = (role or "").strip().lower() in DECORATIVE_ROLES or alt == ""
    too_long = len(trimmed) > ALT_MAX_LENGTH

    if decorative and trimmed:
        return DiagnosticKind.ALT_DECORATIVE_INCORRECT, too_long
    if functional and not trimmed:
        return DiagnosticKind.ALT_FUNCTIONAL_EMPTY, False
    if not trimmed:
        return DiagnosticKind.ALT_EMPTY, False
    return None, too_long


class AltTextRule:
    rule_id = "alt-attributes"
    kinds = (
        DiagnosticKind.MISSING_ALT,
        DiagnosticKind.ALT_DECORATIVE_INCORRECT,
        DiagnosticKind.ALT_FUNCTIONAL_EMPTY,
        DiagnosticKind.ALT_EMPTY,
        DiagnosticKind.ALT_TOO_LONG,
    )
    description = "Images need appropriate alternative text"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        found: List[Diagnostic] = []

        for img in document.find_all("img"):
            line = resolve_line(source, img)

            alt = attr(img, "alt")
            functional = img.find_parent(FUNCTIONAL_CONTAINERS) is not None
            kind, too_long = classify_alt(alt, attr(img, "role"), functional)

            if kind is not None:
                found.append(Diagnostic(label=label, line=line, kind=kind, message=ALT_MESSAGES[kind]))
            if too_long and alt is not None:
                found.append(
                    Diagnostic(
                        label=label,
                        line=line,
                        kind=DiagnosticKind.ALT_TOO_LONG,
                        message=f"alt text is {len(alt.strip())} characters (max {ALT_MAX_LENGTH}): \"{alt.strip()}\"",
                    )
                )
        # Images sharing a line (minified markup) may yield identical findings.
        return list(dict.fromkeys(found))
