# Copyright (c) Meta Platforms, Inc. and affiliates.
# Modifications copyright (c) 2025 Logan Martel.
# Adapted from https://github.com/meta-pytorch/KernelAgent (Apache-2.0).

"""Runs the Jasper ``JspC`` translator in a ``java`` subprocess."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from pathlib import Path
from typing import List, Optional, Sequence

from jspc.constants import DEFAULT_JSPC_MAIN_CLASS
from jspc.exceptions import CompilationError
from jspc.runtime.context import active_context
from jspc.types import CompilerOptions

from .base import JspCompiler

LOGGER = logging.getLogger(__name__)


def _option_switches(options: CompilerOptions) -> List[str]:
    switches: List[str] = []
    if options.verbose > 0:
        switches.append(f"-v{options.verbose}")
    if not options.smap_suppressed:
        switches.append("-smap")
    if options.smap_dumped:
        switches.append("-dumpsmap")
    if options.compile:
        switches.append("-compile")
    if options.validate_xml:
        switches.append("-validateXml")
    if options.trim_spaces:
        switches.append("-trimSpaces")
    if options.error_on_use_bean_invalid_class_attribute:
        switches.append("-errorOnUseBeanInvalidClassAttribute")
    if options.source_vm:
        switches += ["-compilerSourceVM", options.source_vm]
    if options.target_vm:
        switches += ["-compilerTargetVM", options.target_vm]
    return switches


class JasperJspCompiler(JspCompiler):
    """Launches ``org.apache.jasper.JspC`` with the active class path."""

    def __init__(
        self,
        options: Optional[CompilerOptions] = None,
        *,
        java: Optional[str] = None,
        main_class: str = DEFAULT_JSPC_MAIN_CLASS,
        classpath: Sequence[str | Path] = (),
    ) -> None:
        self.options = options or CompilerOptions()
        self.java = java
        self.main_class = main_class
        self.classpath = [str(entry) for entry in classpath]

    def java_executable(self) -> str:
        if self.java:
            return self.java
        java_home = os.environ.get("JAVA_HOME")
        if java_home:
            candidate = Path(java_home) / "bin" / "java"
            if candidate.exists():
                return str(candidate)
        found = shutil.which("java")
        if not found:
            raise CompilationError("Unable to find a java executable")
        return found

    def command(self, arguments: Sequence[str]) -> List[str]:
        entries = [active_context().classpath(), *self.classpath]
        classpath = os.pathsep.join(entry for entry in entries if entry)
        argv = [self.java_executable()]
        if classpath:
            argv += ["-cp", classpath]
        argv.append(self.main_class)
        argv += _option_switches(self.options)
        argv += list(arguments)
        return argv

    def compile(self, arguments: Sequence[str]) -> None:
        argv = self.command(arguments)
        LOGGER.debug("Jspc command: %s", argv)
        proc = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
        )
        for line in proc.stdout.splitlines():
            LOGGER.debug("[jspc] %s", line)
        if proc.returncode != 0:
            raise CompilationError(proc.stderr or f"rc={proc.returncode}")
