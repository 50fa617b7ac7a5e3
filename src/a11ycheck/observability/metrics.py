"""
Defines Prometheus metrics for the audit engine.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (test collection, reloads) must not register the
# same collector twice.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race, use the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    # Counter names are registered without the ``_total`` suffix the client appends.
    return {
        "documents_analyzed": Counter(
            "a11ycheck_documents_analyzed",
            "Total number of documents analyzed by the audit engine",
        ),
        "diagnostics_emitted": Counter(
            "a11ycheck_diagnostics",
            "Total number of diagnostics emitted, by kind",
            ["kind"],
        ),
        "rule_duration_seconds": Histogram(
            "a11ycheck_rule_duration_seconds",
            "Time taken by a single rule on one document",
            ["rule"],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
        ),
        "rule_failures": Counter(
            "a11ycheck_rule_failures",
            "Total number of unexpected rule errors",
            ["rule"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()
