"""
Document structure rules: heading hierarchy and landmarks.
"""

from __future__ import annotations

from functools import reduce
from typing import List, Sequence, Tuple

from bs4 import BeautifulSoup

from a11ycheck.protocols import Diagnostic, DiagnosticKind

from .common import make_diagnostic, visible_text

HEADINGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
LANDMARKS = ["main", "nav", "header", "footer", "aside"]

# (index into the heading sequence, offending level, level it followed)
HeadingJump = Tuple[int, int, int]


def heading_order_violations(levels: Sequence[int]) -> List[HeadingJump]:
    """Fold over heading levels and collect illegal downward jumps.

    The state is the last seen level (0 before any heading). A transition is
    illegal when it increases the level by more than one. The state always
    advances to the current level, so a single skip is reported once.
    """

    def step(state: Tuple[int, Tuple[HeadingJump, ...]], item: Tuple[int, int]) -> Tuple[int, Tuple[HeadingJump, ...]]:
        last_level, found = state
        index, level = item
        if last_level and level - last_level > 1:
            found = found + ((index, level, last_level),)
        return level, found

    _, violations = reduce(step, enumerate(levels), (0, ()))
    return list(violations)


class HeadingOrderRule:
    rule_id = "heading-order"
    kinds = (DiagnosticKind.HEADING_ORDER,)
    description = "Heading levels must not skip a level when descending"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        headings = document.find_all(HEADINGS)
        levels = [int(h.name[1]) for h in headings]
        return [
            make_diagnostic(
                source,
                label,
                headings[index],
                DiagnosticKind.HEADING_ORDER,
                f"<h{current}> follows <h{previous}>",
            )
            for index, current, previous in heading_order_violations(levels)
        ]


class HeadingEmptyRule:
    rule_id = "heading-empty"
    kinds = (DiagnosticKind.HEADING_EMPTY,)
    description = "Headings must contain text"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        return [
            make_diagnostic(source, label, heading, DiagnosticKind.HEADING_EMPTY, f"<{heading.name}> is empty")
            for heading in document.find_all(HEADINGS)
            if not visible_text(heading)
        ]


class MultipleH1Rule:
    rule_id = "multiple-h1"
    kinds = (DiagnosticKind.MULTIPLE_H1,)
    description = "A document should have a single <h1>"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        h1s = document.find_all("h1")
        total = len(h1s)
        return [
            make_diagnostic(
                source,
                label,
                h1,
                DiagnosticKind.MULTIPLE_H1,
                f"Additional <h1> found (occurrence {position} of {total})",
            )
            for position, h1 in enumerate(h1s[1:], start=2)
        ]


class LandmarkRule:
    rule_id = "missing-landmark"
    kinds = (DiagnosticKind.MISSING_LANDMARK,)
    description = "Documents should contain at least one landmark element"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        if document.find(LANDMARKS) is not None:
            return []
        return [
            Diagnostic(
                label=label,
                line=1,
                kind=DiagnosticKind.MISSING_LANDMARK,
                message=f"No landmark elements ({', '.join(LANDMARKS)}) found",
            )
        ]
