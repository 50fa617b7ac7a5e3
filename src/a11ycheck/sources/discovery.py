"""
Markup file discovery.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import structlog

from a11ycheck.exceptions import TargetNotFoundError

logger = structlog.get_logger(__name__)


def discover_files(root: Path, allowed_extensions: Iterable[str], excluded_dirs: Iterable[str]) -> List[Path]:
    """Recursively collect markup files below ``root`` in a stable order.

    Directories whose name is in ``excluded_dirs`` are pruned. A file passed
    as ``root`` is returned as-is, whatever its extension.
    """
    root = Path(root)
    if root.is_file():
        return [root]
    if not root.is_dir():
        raise TargetNotFoundError(str(root))

    extensions = {ext.lower() for ext in allowed_extensions}
    excluded = set(excluded_dirs)
    found: List[Path] = []

    def walk(directory: Path) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning("Cannot read directory", path=str(directory), error=str(e))
            return
        for entry in entries:
            if entry.is_dir():
                if entry.name not in excluded:
                    walk(entry)
            elif entry.suffix.lower() in extensions:
                found.append(entry)

    walk(root)
    logger.debug("Discovered markup files", root=str(root), count=len(found))
    return found
