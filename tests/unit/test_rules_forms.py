"""Unit tests for form labelling rules."""

import pytest

from a11ycheck.engine.document import parse_document
from a11ycheck.protocols import DiagnosticKind
from a11ycheck.rules.forms import LabelAssociationRule, UnlabeledInputRule


def run(rule, source, label="form.latte"):
    return rule.evaluate(parse_document(source), source, label)


class TestLabelAssociationRule:
    def test_for_pointing_nowhere(self):
        diagnostics = run(LabelAssociationRule(), "<label for=\"ghost\">Name</label>")
        assert len(diagnostics) == 1
        assert diagnostics[0].kind is DiagnosticKind.LABEL_FOR_MISSING
        assert diagnostics[0].message == "<label for=\"ghost\"> references a non-existent ID"

    def test_label_without_for_or_control(self):
        diagnostics = run(LabelAssociationRule(), "<label>Floating text</label>")
        assert [d.kind for d in diagnostics] == [DiagnosticKind.LABEL_MISSING_FOR]

    @pytest.mark.parametrize(
        "markup",
        [
            "<label for=\"n\">Name</label><input id=\"n\">",
            "<label>Name <input type=\"text\"></label>",
            "<label>Colour <select><option>Red</option></select></label>",
            "<label>Notes <textarea></textarea></label>",
        ],
    )
    def test_associated_labels(self, markup):
        assert run(LabelAssociationRule(), markup) == []

    def test_lines_follow_document(self):
        source = "<form>\n<label for=\"a\">A</label>\n<label>B</label>\n</form>"
        diagnostics = run(LabelAssociationRule(), source)
        assert [(d.line, d.kind) for d in diagnostics] == [
            (2, DiagnosticKind.LABEL_FOR_MISSING),
            (3, DiagnosticKind.LABEL_MISSING_FOR),
        ]


class TestUnlabeledInputRule:
    @pytest.mark.parametrize("input_type", ["checkbox", "radio", "CHECKBOX"])
    def test_unlabeled_choice_inputs(self, input_type):
        diagnostics = run(UnlabeledInputRule(), f"<input type=\"{input_type}\" name=\"x\">")
        assert len(diagnostics) == 1
        assert diagnostics[0].message == f"<input type=\"{input_type.lower()}\"> is not associated with a label"

    @pytest.mark.parametrize(
        "markup",
        [
            "<label for=\"c\">Agree</label><input type=\"checkbox\" id=\"c\">",
            "<label><input type=\"radio\" name=\"r\"> Yes</label>",
            "<input type=\"text\">",
            "<input type=\"submit\" value=\"Send\">",
        ],
    )
    def test_labelled_or_other_inputs(self, markup):
        assert run(UnlabeledInputRule(), markup) == []

    def test_id_without_matching_label(self):
        source = "<label for=\"other\">Other</label><input type=\"checkbox\" id=\"c\">"
        assert len(run(UnlabeledInputRule(), source)) == 1
