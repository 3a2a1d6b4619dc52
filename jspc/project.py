"""Minimal model of the host build project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from jspc.constants import DEFAULT_PACKAGING


@dataclass
class ProjectModel:
    """The parts of a build project the precompiler reads or updates."""

    basedir: Path
    build_directory: Path
    output_directory: Path
    packaging: str = DEFAULT_PACKAGING
    properties: Dict[str, str] = field(default_factory=dict)
    classpath_elements: List[str] = field(default_factory=list)
    compile_source_roots: List[Path] = field(default_factory=list)

    @property
    def is_war(self) -> bool:
        return self.packaging == "war"

    def add_compile_source_root(self, path: Path) -> None:
        path = Path(path)
        if path not in self.compile_source_roots:
            self.compile_source_roots.append(path)


__all__ = ["ProjectModel"]
