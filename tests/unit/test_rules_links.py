"""Unit tests for link and iframe rules."""

import pytest

from a11ycheck.engine.document import parse_document
from a11ycheck.protocols import DiagnosticKind
from a11ycheck.rules.links import EmptyLinkRule, IframeTitleRule, NewTabLinkRule


def run(rule, source, label="page.html"):
    return rule.evaluate(parse_document(source), source, label)


class TestEmptyLinkRule:
    @pytest.mark.parametrize("markup", ["<a href=\"/x\"></a>", "<a href=\"/x\">   </a>", "<a href=\"\"></a>"])
    def test_link_without_text(self, markup):
        diagnostics = run(EmptyLinkRule(), markup)
        assert [d.message for d in diagnostics] == ["Link has no text content or accessible name"]
        assert diagnostics[0].kind is DiagnosticKind.EMPTY_LINK

    @pytest.mark.parametrize("href", ["#", "", "javascript:void(0)", " JavaScript:go() "])
    def test_non_functional_href(self, href):
        diagnostics = run(EmptyLinkRule(), f"<a href=\"{href}\">Click</a>")
        assert len(diagnostics) == 1
        assert diagnostics[0].message.startswith("Link has a non-functional href")

    def test_single_diagnostic_for_empty_link_with_useless_href(self):
        assert len(run(EmptyLinkRule(), "<a href=\"#\"></a>")) == 1

    @pytest.mark.parametrize("markup", ["<a id=\"top\"></a>", "<a name=\"x\"></a>", "<a></a>"])
    def test_anchors_without_href_are_not_links(self, markup):
        assert run(EmptyLinkRule(), markup) == []

    @pytest.mark.parametrize(
        "markup",
        [
            "<a href=\"/about\">About us</a>",
            "<a href=\"#main\">Skip to content</a>",
            "<a href=\"/\" aria-label=\"Home\"></a>",
            "<a href=\"/\"><img src=\"logo.png\" alt=\"Home\"></a>",
        ],
    )
    def test_good_links(self, markup):
        assert run(EmptyLinkRule(), markup) == []


class TestIframeTitleRule:
    @pytest.mark.parametrize(
        "markup", ["<iframe src=\"/m\"></iframe>", "<iframe src=\"/m\" title=\"\"></iframe>", "<iframe title=\" \"></iframe>"]
    )
    def test_missing_title(self, markup):
        diagnostics = run(IframeTitleRule(), markup)
        assert [d.kind for d in diagnostics] == [DiagnosticKind.IFRAME_TITLE_MISSING]

    def test_titled_iframe(self):
        assert run(IframeTitleRule(), "<iframe src=\"/m\" title=\"Map\"></iframe>") == []


class TestNewTabLinkRule:
    def test_unannounced_new_tab(self):
        diagnostics = run(NewTabLinkRule(), "<a href=\"/p\" target=\"_blank\">Partners</a>")
        assert [d.kind for d in diagnostics] == [DiagnosticKind.LINK_NEW_TAB_WARNING]

    @pytest.mark.parametrize(
        "markup",
        [
            "<a href=\"/p\" target=\"_blank\">Partners (opens in new tab)</a>",
            "<a href=\"/p\" target=\"_blank\" aria-label=\"Partners, new window\">Partners</a>",
            "<a href=\"/p\" target=\"_blank\" title=\"External site\">Partners</a>",
            "<a href=\"/p\" target=\"_self\">Partners</a>",
            "<a href=\"/p\">Partners</a>",
        ],
    )
    def test_announced_or_same_tab(self, markup):
        assert run(NewTabLinkRule(), markup) == []
