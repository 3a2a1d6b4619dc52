"""Page translator interface."""

from __future__ import annotations

from typing import Protocol, Sequence


class JspCompiler(Protocol):
    def compile(self, arguments: Sequence[str]) -> None:
        """Translate the pages named by ``arguments``.

        Implementations raise ``CompilationError`` when the translator
        reports a failure.
        """
        ...
