"""
Inline style colour contrast rule.
"""

from __future__ import annotations

from typing import Dict, List

from bs4 import BeautifulSoup

from a11ycheck.engine.contrast import AA_NORMAL_TEXT, contrast_ratio, parse_color
from a11ycheck.protocols import Diagnostic, DiagnosticKind

from .common import attr, make_diagnostic


def parse_inline_style(style: str) -> Dict[str, str]:
    """Split a ``style`` attribute into lower-cased property -> raw value."""
    declarations: Dict[str, str] = {}
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop = prop.strip().lower()
        if prop:
            declarations[prop] = value.strip()
    return declarations


class ContrastRule:
    rule_id = "contrast"
    kinds = (DiagnosticKind.CONTRAST,)
    description = f"Inline text colours need a contrast ratio of at least {AA_NORMAL_TEXT}:1"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        for el in document.find_all(style=True):
            styles = parse_inline_style(attr(el, "style") or "")
            fg_text = styles.get("color")
            bg_text = styles.get("background-color")
            if fg_text is None or bg_text is None:
                continue
            foreground, background = parse_color(fg_text), parse_color(bg_text)
            if not (foreground.valid and background.valid):
                continue
            ratio = contrast_ratio(foreground, background)
            if ratio < AA_NORMAL_TEXT:
                diagnostics.append(
                    make_diagnostic(
                        source,
                        label,
                        el,
                        DiagnosticKind.CONTRAST,
                        f"Low contrast ratio {ratio:.2f}:1 between color '{fg_text}' and background-color '{bg_text}'",
                    )
                )
        return diagnostics
