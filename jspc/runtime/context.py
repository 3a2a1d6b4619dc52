"""Process-wide class-resolution context used by the page translator."""

from __future__ import annotations

import os
import threading

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True, eq=False)
class ExecutionContext:
    """A chain of search-path entries delegating to a parent first.

    Contexts compare by identity so callers can check that the exact
    context they captured is the one active again.
    """

    entries: Tuple[Path, ...] = ()
    parent: Optional["ExecutionContext"] = None

    def child(self, *entries: Path) -> "ExecutionContext":
        return ExecutionContext(entries=tuple(entries), parent=self)

    def search_path(self) -> List[Path]:
        inherited = self.parent.search_path() if self.parent else []
        return inherited + [
            entry for entry in self.entries if entry not in inherited
        ]

    def classpath(self) -> str:
        return os.pathsep.join(str(entry) for entry in self.search_path())


_ROOT_CONTEXT = ExecutionContext()
_active: ExecutionContext = _ROOT_CONTEXT
_lock = threading.Lock()


def root_context() -> ExecutionContext:
    return _ROOT_CONTEXT


def active_context() -> ExecutionContext:
    """Return the currently installed context."""

    with _lock:
        return _active


def set_active_context(context: ExecutionContext) -> ExecutionContext:
    """Install ``context`` and return the one it replaced."""

    global _active
    with _lock:
        previous = _active
        _active = context
    return previous


@contextmanager
def activated_context(*entries: Path) -> Iterator[ExecutionContext]:
    """Install a child of the active context exposing ``entries``.

    The previously active context is reinstated on exit, including when
    the body raises.
    """

    parent = active_context()
    context = parent.child(*entries)
    set_active_context(context)
    try:
        yield context
    finally:
        set_active_context(parent)


__all__ = [
    "ExecutionContext",
    "activated_context",
    "active_context",
    "root_context",
    "set_active_context",
]
