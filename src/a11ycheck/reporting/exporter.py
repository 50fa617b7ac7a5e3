"""
JSON export of audit results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import structlog

from a11ycheck.protocols import Diagnostic
from a11ycheck.utils.atomic import atomic_write_json

logger = structlog.get_logger(__name__)


def export_json(diagnostics: Sequence[Diagnostic], path: Path) -> None:
    """Write diagnostics as a JSON list of ``{file, line, type, message}`` records."""
    atomic_write_json(Path(path), [d.to_dict() for d in diagnostics])
    logger.info("Results exported", path=str(path), count=len(diagnostics))
