"""
End-to-end audit of a template project: discovery, configuration, analysis,
aggregation and export.
"""

import json

import pytest

from a11ycheck.config import load_config
from a11ycheck.pipeline import AuditPipeline
from a11ycheck.reporting import export_json, summarize

LAYOUT = """{block content}
<header><nav aria-label="Primary"><a href="/">Home</a></nav></header>
<main>
  {include content}
</main>
<footer>&copy; 2024</footer>
"""

PRODUCT = """<main>
<h1>{$product->name}</h1>
<h3>Details</h3>
<img src="{$product->image}">
<p style="color: #999999; background-color: #ffffff">Price on request</p>
<a href="{$product->url}" target="_blank">Manufacturer</a>
</main>
"""

CONTACT_FORM = """export const Contact = () => (
  <main>
    <h1>Contact</h1>
    <form aria-label="Contact">
      <label htmlFor="email">Email</label>
      <input type="checkbox" id="agree" />
      <button></button>
    </form>
  </main>
);
"""


@pytest.mark.integration
class TestTemplateProjectAudit:
    """A small mixed-template project audited like a CI job would."""

    @pytest.fixture
    def project(self, write_tree):
        return write_tree(
            {
                "app/templates/@layout.latte": LAYOUT,
                "app/templates/Product/detail.latte": PRODUCT,
                "frontend/Contact.jsx": CONTACT_FORM,
                "frontend/node_modules/lib/index.html": "<img src=x>",
                "README.md": "<img src=x>",
            }
        )

    @pytest.mark.asyncio
    async def test_full_audit(self, project, tmp_path):
        config = load_config(tmp_path / "missing.json")
        report = await AuditPipeline(config).audit_target(str(project))

        assert report.documents == 3
        labels = {d.label for d in report.diagnostics}
        assert not any("node_modules" in label or label.endswith("README.md") for label in labels)

        product = [d for d in report.diagnostics if d.label.endswith("detail.latte")]
        by_kind = {d.kind.value: d for d in product}
        assert by_kind["heading-order"].line == 3
        assert by_kind["missing-alt"].line == 4
        assert by_kind["contrast"].line == 5
        assert by_kind["link-new-tab-warning"].line == 6

        contact = {d.kind.value for d in report.diagnostics if d.label.endswith("Contact.jsx")}
        assert {"missing-aria", "input-unlabeled"} <= contact

        layout = {d.kind.value for d in report.diagnostics if d.label.endswith("@layout.latte")}
        assert "missing-landmark" not in layout

        out = tmp_path / "report.json"
        export_json(report.diagnostics, out)
        records = json.loads(out.read_text(encoding="utf-8"))
        assert len(records) == len(report.diagnostics)
        assert sum(count for _, count in summarize(report.diagnostics)) == len(records)

    @pytest.mark.asyncio
    async def test_project_config_file(self, project, tmp_path):
        config_path = tmp_path / "a11y.config.yaml"
        config_path.write_text("rules:\n  contrast: false\n  link-new-tab-warning: false\nscan:\n  max_concurrency: 1\n")
        config = load_config(config_path)
        report = await AuditPipeline(config).audit_target(str(project))

        kinds = {d.kind.value for d in report.diagnostics}
        assert "contrast" not in kinds
        assert "link-new-tab-warning" not in kinds
        assert "heading-order" in kinds
