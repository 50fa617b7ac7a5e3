"""
Core contracts and data structures for a11ycheck.

Everything the rule engine produces or consumes is declared here:
diagnostic kinds, the immutable Diagnostic record, parsed colours and the
Rule protocol implemented by every entry of the rule catalogue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Protocol, Tuple, runtime_checkable

from bs4 import BeautifulSoup

# ============================================================================
# Enums and Constants
# ============================================================================


class DiagnosticKind(Enum):
    """Stable identifiers that reporters switch on."""

    HEADING_ORDER = "heading-order"
    HEADING_EMPTY = "heading-empty"
    MULTIPLE_H1 = "multiple-h1"
    MISSING_LANDMARK = "missing-landmark"
    MISSING_ALT = "missing-alt"
    ALT_EMPTY = "alt-empty"
    ALT_TOO_LONG = "alt-too-long"
    ALT_DECORATIVE_INCORRECT = "alt-decorative-incorrect"
    ALT_FUNCTIONAL_EMPTY = "alt-functional-empty"
    ARIA_INVALID = "aria-invalid"
    MISSING_ARIA = "missing-aria"
    ARIA_ROLE_INVALID = "aria-role-invalid"
    LABEL_FOR_MISSING = "label-for-missing"
    LABEL_MISSING_FOR = "label-missing-for"
    INPUT_UNLABELED = "input-unlabeled"
    EMPTY_LINK = "empty-link"
    IFRAME_TITLE_MISSING = "iframe-title-missing"
    LINK_NEW_TAB_WARNING = "link-new-tab-warning"
    CONTRAST = "contrast"


# ============================================================================
# Core Dataclasses
# ============================================================================


@dataclass(frozen=True)
class Diagnostic:
    """A single accessibility finding, positioned in its source document."""

    label: str
    line: int
    kind: DiagnosticKind
    message: str

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError("Diagnostic line must be a positive integer")
        if not self.message:
            raise ValueError("Diagnostic message must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON export record shape."""
        return {
            "file": self.label,
            "line": self.line,
            "type": self.kind.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class ColorSpec:
    """A parsed CSS colour. Only valid specs may enter the luminance formula."""

    red: int = 0
    green: int = 0
    blue: int = 0
    valid: bool = False
    source: str = ""

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


# ============================================================================
# Protocols
# ============================================================================


@runtime_checkable
class Rule(Protocol):
    """One entry of the rule catalogue.

    A rule is a pure function of the parsed document and its source text:
    it never mutates the tree, never keeps state between calls and never
    raises for unusual markup.
    """

    rule_id: str
    kinds: Tuple[DiagnosticKind, ...]
    description: str

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        """Evaluate the document and return diagnostics in document order.

        Args:
            document: Parsed node tree of the source text
            source: Original, unmodified markup
            label: File path or URL identifying the document

        Returns:
            Diagnostics emitted by this rule (possibly empty)
        """
        ...
