"""Copy generated bytecode into the project's output directory."""

from __future__ import annotations

import logging
import shutil

from pathlib import Path
from typing import List

from jspc.constants import CLASS_FILE_PATTERN

LOGGER = logging.getLogger(__name__)


def copy_class_files(
    source_dir: Path,
    target_dir: Path,
    *,
    pattern: str = CLASS_FILE_PATTERN,
) -> List[Path]:
    """Copy files matching ``pattern`` preserving their relative layout."""

    source_dir = Path(source_dir)
    target_dir = Path(target_dir)
    copied: List[Path] = []
    if not source_dir.is_dir():
        return copied
    for path in sorted(source_dir.glob(pattern)):
        if not path.is_file():
            continue
        destination = target_dir / path.relative_to(source_dir)
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, destination)
        copied.append(destination)
    LOGGER.debug("Copied %d class files into %s", len(copied), target_dir)
    return copied


__all__ = ["copy_class_files"]
