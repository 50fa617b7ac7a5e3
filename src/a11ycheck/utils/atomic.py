"""
Atomic file writing utilities.

A report is either fully written or not written at all: content goes to a
temporary file in the target directory and is then moved into place.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def atomic_write_json(target_path: Path, data: Any) -> None:
    """
    Atomically write JSON data to a file.

    Args:
        target_path: Target file path to write to
        data: JSON-serializable data

    Raises:
        OSError: If writing or moving the file fails
        ValueError: If data cannot be serialized to JSON
    """
    target_path = Path(target_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)

    # Serialize first so a bad payload never leaves a temp file behind
    try:
        json_content = json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Failed to serialize data to JSON", error=str(e))
        raise ValueError(f"Cannot serialize data to JSON: {e}") from e

    temp_file_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=target_path.parent,
            prefix=f".{target_path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as temp_file:
            temp_file_path = Path(temp_file.name)
            temp_file.write(json_content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        try:
            os.replace(str(temp_file_path), str(target_path))
        except OSError as rename_error:
            logger.warning(
                "Atomic rename failed, falling back to shutil.move", error=str(rename_error), target=str(target_path)
            )
            shutil.move(str(temp_file_path), str(target_path))
        logger.debug("Atomic write completed", target=str(target_path))

    except Exception:
        if temp_file_path and temp_file_path.exists():
            temp_file_path.unlink(missing_ok=True)
        raise
