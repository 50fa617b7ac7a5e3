"""
Console rendering of audit results with rich.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from a11ycheck.protocols import Diagnostic

from .aggregator import group_by_kind, summarize

# kind -> (heading, style)
KIND_TITLES: Dict[str, Tuple[str, str]] = {
    "heading-order": ("📐 Heading Order", "bold yellow"),
    "heading-empty": ("❗ Empty Headings", "bold red"),
    "multiple-h1": ("🧱 Multiple H1s", "bold yellow"),
    "missing-landmark": ("🏛️  Landmark Elements", "bold bright_yellow"),
    "missing-alt": ("🖼️  Missing ALT", "bold cyan"),
    "alt-empty": ("⬜ ALT Empty", "bold white"),
    "alt-too-long": ("↔️  ALT Too Long", "bold red"),
    "alt-decorative-incorrect": ("🌈 ALT Decorative", "bold bright_black"),
    "alt-functional-empty": ("🔗 ALT Functional", "bold bright_blue"),
    "aria-invalid": ("♿ ARIA Issues", "bold magenta"),
    "missing-aria": ("👀 Missing ARIA", "bold blue"),
    "aria-role-invalid": ("🧩 ARIA Role Issues", "bold blue"),
    "label-for-missing": ("🔗 Broken Label Association", "bold red"),
    "label-missing-for": ("🏷️  Unassociated Label", "bold yellow"),
    "input-unlabeled": ("🔘 Unlabeled Checkboxes/Radios", "bold magenta"),
    "empty-link": ("📭 Empty or Useless Link", "bold red"),
    "iframe-title-missing": ("🖼️  Missing <iframe> Title", "bold blue"),
    "link-new-tab-warning": ("🧭 New Tab Warning", "bold yellow"),
    "contrast": ("🎨 Contrast Issues", "bold red"),
}


def render_report(console: Console, diagnostics: Sequence[Diagnostic]) -> None:
    """Print every diagnostic, grouped under a heading per kind."""
    console.print("\n[red]🚨 Accessibility Issues Found:[/red]")
    for kind, items in group_by_kind(diagnostics).items():
        title, style = KIND_TITLES.get(kind, (kind, "bold white"))
        console.print(f"\n[{style}]{escape(title)}[/{style}]")
        for d in items:
            console.print(
                f"  [bright_black]-[/bright_black] [green]{escape(d.label)}[/green]:[yellow]{d.line}[/yellow]"
                f" – {escape(d.message)}"
            )


def render_summary(console: Console, diagnostics: Sequence[Diagnostic]) -> None:
    table = Table(title="📊 Accessibility Summary")
    table.add_column("Issue Type", style="cyan")
    table.add_column("Count", style="magenta", justify="right")
    for kind, count in summarize(diagnostics):
        table.add_row(kind, str(count))
    console.print()
    console.print(table)
