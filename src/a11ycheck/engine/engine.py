"""
The audit engine: runs the rule catalogue over one document.
"""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

import structlog
from bs4 import BeautifulSoup

from a11ycheck.config.config import is_rule_enabled
from a11ycheck.observability.metrics import METRICS
from a11ycheck.protocols import Diagnostic, Rule
from a11ycheck.rules import CATALOGUE

from .document import parse_document

logger = structlog.get_logger(__name__)


class AuditEngine:
    """
    Single entry point of the core.

    Runs every enabled rule in catalogue order and concatenates the results.
    The engine holds nothing but the read-only rule flags, so one instance
    can serve any number of documents, from any number of threads.
    """

    def __init__(
        self,
        rules: Optional[Mapping[str, bool]] = None,
        catalogue: Sequence[Rule] = CATALOGUE,
    ) -> None:
        self.rules: Mapping[str, bool] = MappingProxyType(dict(rules or {}))
        self.catalogue = tuple(catalogue)

    def is_enabled(self, rule: Rule) -> bool:
        """A rule runs when its id and at least one of its kinds are enabled.

        A rule id that doubles as one of the rule's kinds gates only that kind.
        """
        kinds = {kind.value for kind in rule.kinds}
        if rule.rule_id not in kinds and not is_rule_enabled(self.rules, rule.rule_id):
            return False
        return any(is_rule_enabled(self.rules, kind.value) for kind in rule.kinds)

    def enabled_rules(self) -> List[Rule]:
        return [rule for rule in self.catalogue if self.is_enabled(rule)]

    def analyze(self, document: BeautifulSoup, source: str, label: str) -> List[Diagnostic]:
        """Analyze a parsed document.

        Args:
            document: Node tree parsed from ``source``
            source: Original markup, used to resolve line numbers
            label: File path or URL reported with every diagnostic

        Returns:
            Diagnostics grouped by rule in catalogue order, document order
            within each rule
        """
        diagnostics: List[Diagnostic] = []

        for rule in self.enabled_rules():
            start = time.perf_counter()
            try:
                found = rule.evaluate(document, source, label)
            except Exception as e:
                METRICS["rule_failures"].labels(rule=rule.rule_id).inc()
                logger.error("Rule failed", rule=rule.rule_id, label=label, error=str(e), exc_info=True)
                continue
            finally:
                METRICS["rule_duration_seconds"].labels(rule=rule.rule_id).observe(time.perf_counter() - start)

            for diagnostic in found:
                if is_rule_enabled(self.rules, diagnostic.kind.value):
                    diagnostics.append(diagnostic)
                    METRICS["diagnostics_emitted"].labels(kind=diagnostic.kind.value).inc()

        METRICS["documents_analyzed"].inc()
        logger.debug("Document analyzed", label=label, diagnostics=len(diagnostics))
        return diagnostics

    def analyze_source(self, source: str, label: str) -> List[Diagnostic]:
        """Parse ``source`` and analyze it."""
        return self.analyze(parse_document(source), source, label)
