"""Bracket a page translator call with a scoped execution context."""

from __future__ import annotations

import logging
import time

from pathlib import Path
from typing import Sequence

from jspc.compilers.base import JspCompiler
from jspc.exceptions import CompilationError
from jspc.runtime.context import activated_context
from jspc.types import CompilationReport, ResolvedTool

LOGGER = logging.getLogger(__name__)


def describe_compilation(file_count: int, working_directory: Path) -> str:
    if file_count:
        plural = "s" if file_count > 1 else ""
        return (
            f"Compiling {file_count} JSP source file{plural} "
            f"to {working_directory}"
        )
    return f"Compiling JSP source files to {working_directory}"


class CompilerInvoker:
    """Runs a compiler with the tools archive exposed on the class path."""

    def __init__(self, compiler: JspCompiler) -> None:
        self.compiler = compiler

    def invoke(
        self,
        arguments: Sequence[str],
        tool: ResolvedTool,
        *,
        file_count: int,
        working_directory: Path,
    ) -> CompilationReport:
        with activated_context(tool.path):
            LOGGER.info(describe_compilation(file_count, working_directory))
            started = time.perf_counter()
            try:
                self.compiler.compile(list(arguments))
            except CompilationError:
                raise
            except Exception as exc:
                raise CompilationError(str(exc)) from exc
            elapsed = time.perf_counter() - started
        LOGGER.info("Compilation completed in %.3fs", elapsed)
        return CompilationReport(
            file_count=file_count,
            elapsed_s=elapsed,
            working_directory=working_directory,
        )


__all__ = ["CompilerInvoker", "describe_compilation"]
