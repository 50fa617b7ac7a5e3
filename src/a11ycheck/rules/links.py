"""
Link and embedded frame rules.
"""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from a11ycheck.protocols import Diagnostic, DiagnosticKind

from .common import accessible_text, attr, has_aria_name, make_diagnostic

NEW_TAB_HINTS = ("new tab", "new window", "opens in", "external")


def _useless_href(href: str) -> bool:
    value = href.strip().lower()
    return value in ("", "#") or value.startswith("javascript:")


def _link_name(link: Tag) -> str:
    parts = [accessible_text(link), attr(link, "aria-label") or "", attr(link, "title") or ""]
    return " ".join(p.strip() for p in parts if p and p.strip())


class EmptyLinkRule:
    rule_id = "empty-link"
    kinds = (DiagnosticKind.EMPTY_LINK,)
    description = "Links need text and a real destination"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        diagnostics = []
        for link in document.find_all("a", href=True):
            if not (accessible_text(link) or has_aria_name(link)):
                message = "Link has no text content or accessible name"
            elif _useless_href(link["href"]):
                message = f"Link has a non-functional href: \"{link['href'].strip()}\""
            else:
                continue
            diagnostics.append(make_diagnostic(source, label, link, DiagnosticKind.EMPTY_LINK, message))
        return diagnostics


class IframeTitleRule:
    rule_id = "iframe-title-missing"
    kinds = (DiagnosticKind.IFRAME_TITLE_MISSING,)
    description = "Frames need a descriptive title"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        return [
            make_diagnostic(
                source,
                label,
                frame,
                DiagnosticKind.IFRAME_TITLE_MISSING,
                "<iframe> is missing a non-empty 'title' attribute to describe its content",
            )
            for frame in document.find_all("iframe")
            if not (attr(frame, "title") or "").strip()
        ]


class NewTabLinkRule:
    rule_id = "link-new-tab-warning"
    kinds = (DiagnosticKind.LINK_NEW_TAB_WARNING,)
    description = "Links opening a new tab should say so"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        diagnostics = []
        for link in document.find_all("a"):
            if (attr(link, "target") or "").strip().lower() != "_blank":
                continue
            name = _link_name(link).lower()
            if any(hint in name for hint in NEW_TAB_HINTS):
                continue
            diagnostics.append(
                make_diagnostic(
                    source,
                    label,
                    link,
                    DiagnosticKind.LINK_NEW_TAB_WARNING,
                    "Link opens in a new tab without warning the user",
                )
            )
        return diagnostics
