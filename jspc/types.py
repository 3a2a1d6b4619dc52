"""Core dataclasses used throughout the jspc pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class CompilerOptions:
    """Translator switches that are not part of the assembled arguments."""

    verbose: int = 0
    show_success: bool = True
    list_errors: bool = True
    smap_dumped: bool = False
    smap_suppressed: bool = False
    validate_xml: bool = False
    trim_spaces: bool = True
    error_on_use_bean_invalid_class_attribute: bool = True
    compile: bool = True
    source_vm: Optional[str] = None
    target_vm: Optional[str] = None


@dataclass(frozen=True)
class CompilationRequest:
    """Everything the translator needs for one run.

    Built once per invocation and never mutated afterwards.
    """

    source_root: Optional[Path]
    output_directory: Optional[Path]
    web_fragment_file: Path
    package_name: str
    encoding: Optional[str] = None
    classpath: Tuple[str, ...] = ()
    source_files: Tuple[Path, ...] = ()
    options: CompilerOptions = field(default_factory=CompilerOptions)

    @property
    def file_count(self) -> int:
        return len(self.source_files)


@dataclass(frozen=True)
class ResolvedTool:
    """Location of the platform support archive."""

    path: Path

    @property
    def uri(self) -> str:
        return self.path.as_uri()


@dataclass(frozen=True)
class CompilationReport:
    file_count: int
    elapsed_s: float
    working_directory: Path


@dataclass
class WebDescriptor:
    """Original deployment descriptor text plus its detected encoding."""

    path: Path
    text: str
    encoding: str
    marker: str


@dataclass(frozen=True)
class WebFragment:
    path: Path
    text: str


@dataclass(frozen=True)
class MergeResult:
    path: Path
    text: str
    encoding: str


@dataclass
class JspcResult:
    """Summary of what a single orchestrator run did."""

    report: CompilationReport
    copied_artifacts: List[Path] = field(default_factory=list)
    merge: Optional[MergeResult] = None
    source_root: Optional[Path] = None


__all__ = [
    "CompilerOptions",
    "CompilationRequest",
    "ResolvedTool",
    "CompilationReport",
    "WebDescriptor",
    "WebFragment",
    "MergeResult",
    "JspcResult",
]
