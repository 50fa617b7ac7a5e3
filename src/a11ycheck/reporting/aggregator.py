"""
Grouping and counting of diagnostics for reports.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from a11ycheck.protocols import Diagnostic


def group_by_kind(diagnostics: Iterable[Diagnostic]) -> Dict[str, List[Diagnostic]]:
    """Group diagnostics by kind identifier, in order of first appearance."""
    grouped: Dict[str, List[Diagnostic]] = {}
    for diagnostic in diagnostics:
        grouped.setdefault(diagnostic.kind.value, []).append(diagnostic)
    return grouped


def summarize(diagnostics: Iterable[Diagnostic]) -> List[Tuple[str, int]]:
    return [(kind, len(items)) for kind, items in group_by_kind(diagnostics).items()]
