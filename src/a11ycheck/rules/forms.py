"""
Form labelling rules.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from a11ycheck.protocols import Diagnostic, DiagnosticKind

from .common import FORM_CONTROLS, attr, document_ids, label_targets, make_diagnostic

CHOICE_INPUT_TYPES = {"checkbox", "radio"}


class LabelAssociationRule:
    rule_id = "label-missing-for"
    kinds = (DiagnosticKind.LABEL_FOR_MISSING, DiagnosticKind.LABEL_MISSING_FOR)
    description = "Labels must reference an existing control or wrap one"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        ids = document_ids(document)

        for lbl in document.find_all("label"):
            target = attr(lbl, "for")
            if target is not None:
                if target not in ids:
                    diagnostics.append(
                        make_diagnostic(
                            source,
                            label,
                            lbl,
                            DiagnosticKind.LABEL_FOR_MISSING,
                            f"<label for=\"{target}\"> references a non-existent ID",
                        )
                    )
            elif lbl.find(FORM_CONTROLS) is None:
                diagnostics.append(
                    make_diagnostic(
                        source,
                        label,
                        lbl,
                        DiagnosticKind.LABEL_MISSING_FOR,
                        "<label> has no 'for' attribute and does not wrap a form control",
                    )
                )
        return diagnostics


class UnlabeledInputRule:
    rule_id = "input-unlabeled"
    kinds = (DiagnosticKind.INPUT_UNLABELED,)
    description = "Checkboxes and radio buttons must be associated with a label"

    def evaluate(self, document: BeautifulSoup, source: str, label: str) -> list[Diagnostic]:
        targets = label_targets(document)
        diagnostics: List[Diagnostic] = []

        for el in document.find_all("input"):
            input_type = (attr(el, "type") or "").strip().lower()
            if input_type not in CHOICE_INPUT_TYPES:
                continue
            element_id = attr(el, "id")
            referenced = bool(element_id) and element_id in targets
            wrapped = el.find_parent("label") is not None
            if not referenced and not wrapped:
                diagnostics.append(
                    make_diagnostic(
                        source,
                        label,
                        el,
                        DiagnosticKind.INPUT_UNLABELED,
                        f"<input type=\"{input_type}\"> is not associated with a label",
                    )
                )
        return diagnostics
