"""
ARIA rules: label validity, accessible names and role values.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag

from a11ycheck.protocols import Diagnostic, DiagnosticKind

from .common import accessible_text, attr, document_ids, has_aria_name, make_diagnostic

# Concrete (non-abstract) WAI-ARIA 1.2 roles.
VALID_ROLES = frozenset(
    {
        # widget
        "button", "checkbox", "gridcell", "link", "menuitem", "menuitemcheckbox",
        "menuitemradio", "option", "progressbar", "radio", "scrollbar", "searchbox",
        "separator", "slider", "spinbutton", "switch", "tab", "tabpanel", "textbox",
        "treeitem",
        # composite
        "combobox", "grid", "listbox", "menu", "menubar", "radiogroup", "tablist",
        "tree", "treegrid",
        # document structure
        "application", "article", "blockquote", "caption", "cell", "code",
        "columnheader", "comment", "definition", "deletion", "directory", "document",
        "emphasis", "feed", "figure", "generic", "group", "heading", "img",
        "insertion", "list", "listitem", "math", "meter", "none", "note",
        "paragraph", "presentation", "row", "rowgroup", "rowheader", "strong",
        "subscript", "superscript", "table", "term", "time", "toolbar", "tooltip",
        # landmark
        "banner", "complementary", "contentinfo", "form", "main", "navigation",
        "region", "search",
        # live region
        "alert", "log", "marquee", "status", "timer",
        # window
        "alertdialog", "dialog",
    }
)

TEXT_INPUT_TYPES = {"", "text", "email", "search", "tel", "url", "password"}


class AriaLabelRule:
    rule_id = "aria-invalid"
    kinds = (DiagnosticKind.ARIA_INVALID,)
    description = "aria-label must not be empty and aria-labelledby must reference existing ids"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        ids = document_ids(document)

        for el in document.select("[aria-label], [aria-labelledby]"):
            aria_label = attr(el, "aria-label")
            if aria_label is not None and not aria_label.strip():
                diagnostics.append(
                    make_diagnostic(source, label, el, DiagnosticKind.ARIA_INVALID, "aria-label is empty")
                )

            labelledby = attr(el, "aria-labelledby")
            if labelledby is None:
                continue
            references = labelledby.split()
            if not references:
                diagnostics.append(
                    make_diagnostic(source, label, el, DiagnosticKind.ARIA_INVALID, "aria-labelledby is empty")
                )
            for ref in references:
                if ref not in ids:
                    diagnostics.append(
                        make_diagnostic(
                            source,
                            label,
                            el,
                            DiagnosticKind.ARIA_INVALID,
                            f"aria-labelledby references a non-existent ID: {ref}",
                        )
                    )
        return diagnostics


class MissingAccessibleNameRule:
    rule_id = "missing-aria"
    kinds = (DiagnosticKind.MISSING_ARIA,)
    description = "Interactive and sectioning elements need an accessible name"

    def _candidates(self, document: BeautifulSoup) -> List[Tag]:
        candidates = []
        for el in document.find_all(["button", "a", "input", "svg", "form", "section", "nav", "aside"]):
            if el.name == "a" and attr(el, "href") is None:
                continue
            if el.name == "input" and (attr(el, "type") or "").strip().lower() not in TEXT_INPUT_TYPES:
                continue
            candidates.append(el)
        return candidates

    def _has_name(self, el: Tag, document: BeautifulSoup) -> bool:
        if has_aria_name(el):
            return True
        if el.name != "input":
            return bool(accessible_text(el))
        if el.find_parent("label") is not None:
            return True
        element_id = attr(el, "id")
        if not element_id:
            return False
        return any(
            attr(lbl, "for") == element_id and accessible_text(lbl)
            for lbl in document.find_all("label")
        )

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        return [
            make_diagnostic(
                source,
                label,
                el,
                DiagnosticKind.MISSING_ARIA,
                f"<{el.name}> has no accessible name (no aria-label, aria-labelledby or text)",
            )
            for el in self._candidates(document)
            if not self._has_name(el, document)
        ]


class AriaRoleRule:
    rule_id = "aria-role-invalid"
    kinds = (DiagnosticKind.ARIA_ROLE_INVALID,)
    description = "role attributes must use recognized ARIA roles"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        for el in document.find_all(attrs={"role": True}):
            role = (attr(el, "role") or "").strip()
            if not role:
                diagnostics.append(
                    make_diagnostic(
                        source, label, el, DiagnosticKind.ARIA_ROLE_INVALID, f"<{el.name}> has an empty role attribute"
                    )
                )
                continue
            invalid = [token for token in role.lower().split() if token not in VALID_ROLES]
            if invalid:
                diagnostics.append(
                    make_diagnostic(
                        source,
                        label,
                        el,
                        DiagnosticKind.ARIA_ROLE_INVALID,
                        f"Invalid ARIA role \"{role}\" on <{el.name}>",
                    )
                )
        return diagnostics
