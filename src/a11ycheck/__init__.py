"""
a11ycheck - Accessibility auditing for HTML and HTML-like templates.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config, load_config
from .engine.engine import AuditEngine
from .protocols import Diagnostic, DiagnosticKind

__all__ = ["__version__", "AuditEngine", "Config", "Diagnostic", "DiagnosticKind", "load_config"]
