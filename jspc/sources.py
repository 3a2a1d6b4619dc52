"""Ant-style include/exclude scanning of page template directories."""

from __future__ import annotations

import re

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Pattern, Tuple

DEFAULT_EXCLUDES: Tuple[str, ...] = (
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    "**/CVS",
    "**/CVS/**",
    "**/.cvsignore",
    "**/RCS",
    "**/RCS/**",
    "**/SCCS",
    "**/SCCS/**",
    "**/vssver.scc",
    "**/.svn",
    "**/.svn/**",
    "**/.bzr",
    "**/.bzr/**",
    "**/.hg",
    "**/.hg/**",
    "**/.git",
    "**/.git/**",
    "**/.gitignore",
    "**/.DS_Store",
)


@dataclass(frozen=True)
class FileSet:
    """A directory plus include/exclude patterns."""

    directory: Path
    includes: Tuple[str, ...] = ()
    excludes: Tuple[str, ...] = ()
    use_default_excludes: bool = True

    @property
    def has_includes(self) -> bool:
        return bool(self.includes)

    def all_excludes(self) -> Tuple[str, ...]:
        if self.use_default_excludes:
            return self.excludes + DEFAULT_EXCLUDES
        return self.excludes


def _translate_segment(segment: str) -> str:
    out: List[str] = []
    for char in segment:
        if char == "*":
            out.append("[^/]*")
        elif char == "?":
            out.append("[^/]")
        else:
            out.append(re.escape(char))
    return "".join(out)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Pattern[str]:
    """Translate an Ant pattern into an anchored regular expression."""

    normalized = pattern.replace("\\", "/").lstrip("/")
    if normalized.endswith("/"):
        normalized += "**"
    parts = normalized.split("/")
    regex: List[str] = []
    for index, part in enumerate(parts):
        last = index == len(parts) - 1
        if part == "**":
            regex.append(".*" if last else "(?:[^/]*/)*")
        else:
            regex.append(_translate_segment(part))
            if not last:
                regex.append("/")
    return re.compile("".join(regex) + r"\Z")


def matches(path: str, patterns: Iterable[str]) -> bool:
    return any(compile_pattern(pattern).match(path) for pattern in patterns)


def resolve_files(file_set: FileSet) -> List[Path]:
    """Return included files relative to the file set directory, sorted."""

    root = Path(file_set.directory)
    if not root.is_dir():
        return []
    excludes = file_set.all_excludes()
    found: List[Path] = []
    for candidate in root.rglob("*"):
        if not candidate.is_file():
            continue
        relative = candidate.relative_to(root).as_posix()
        if not matches(relative, file_set.includes):
            continue
        if matches(relative, excludes):
            continue
        found.append(Path(relative))
    return sorted(found)


def included_paths(file_set: Optional[FileSet]) -> List[Path]:
    """Absolute paths of included files; empty when no includes are set."""

    if file_set is None or not file_set.has_includes:
        return []
    return [file_set.directory / rel for rel in resolve_files(file_set)]


__all__ = [
    "DEFAULT_EXCLUDES",
    "FileSet",
    "compile_pattern",
    "included_paths",
    "matches",
    "resolve_files",
]
