"""Precompilation orchestrator that wires the pipeline steps together."""

from __future__ import annotations

import logging

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from jspc.arguments import build_arguments
from jspc.artifacts import copy_class_files
from jspc.compilers import JspCompiler, load_compiler
from jspc.configuration import JspcSettings, build_jspc_settings
from jspc.constants import DEFAULT_SOURCE_DIRECTORY
from jspc.exceptions import ConfigurationError
from jspc.invoker import CompilerInvoker
from jspc.merge import DescriptorMerger, load_merge_strategy
from jspc.runtime.tools import locate_tool, os_family, resolve_runtime_root
from jspc.sources import FileSet, included_paths
from jspc.types import CompilationRequest, JspcResult

LOGGER = logging.getLogger(__name__)


def load_config(config_path: Path) -> Dict[str, Any]:
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file '{config_path}' not found.")
    return yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}


class JspcOrchestrator:
    """High level controller for one precompilation run."""

    def __init__(
        self,
        settings: JspcSettings,
        *,
        compiler: Optional[JspCompiler] = None,
        os_family_name: Optional[str] = None,
    ) -> None:
        self.settings = settings
        self.project = settings.project
        self._compiler = compiler
        self._os_family = os_family_name or os_family()

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        *,
        config_root: Optional[Path] = None,
        **kwargs: Any,
    ) -> "JspcOrchestrator":
        settings = build_jspc_settings(
            config, config_root=Path(config_root or Path.cwd())
        )
        return cls(settings, **kwargs)

    @classmethod
    def from_file(cls, config_path: Path, **kwargs: Any) -> "JspcOrchestrator":
        config_path = Path(config_path)
        return cls.from_config(
            load_config(config_path),
            config_root=config_path.resolve().parent,
            **kwargs,
        )

    def execute(self) -> Optional[JspcResult]:
        """Run the pipeline; returns ``None`` when skipped."""

        settings = self.settings
        if settings.skip:
            LOGGER.info("Skipping JSP precompilation")
            return None

        is_war = self.project.is_war
        if not is_war or not settings.include_in_project:
            LOGGER.warning(
                "Compiled JSPs will not be added to the project and web.xml "
                "will not be modified, either because include_in_project is "
                "set to false or because the project's packaging is not 'war'."
            )

        sources = settings.sources or FileSet(
            directory=self.project.basedir / DEFAULT_SOURCE_DIRECTORY
        )
        classpath = tuple(self.project.classpath_elements)
        LOGGER.debug("Source directory: %s", sources.directory)
        LOGGER.debug("Classpath: %s", list(classpath))
        LOGGER.debug("Output directory: %s", settings.working_directory)

        request = CompilationRequest(
            source_root=sources.directory,
            output_directory=settings.working_directory,
            web_fragment_file=settings.web_fragment_file,
            package_name=settings.package_name,
            encoding=settings.java_encoding,
            classpath=classpath,
            source_files=tuple(included_paths(sources)),
            options=settings.options,
        )
        arguments = build_arguments(request)
        LOGGER.debug("Jspc args: %s", arguments)

        for directory in (
            settings.working_directory,
            self.project.build_directory,
            self.project.output_directory,
        ):
            directory.mkdir(parents=True, exist_ok=True)

        tool = locate_tool(
            resolve_runtime_root(settings.runtime_root), self._os_family
        )
        report = CompilerInvoker(self._resolve_compiler()).invoke(
            arguments,
            tool,
            file_count=request.file_count,
            working_directory=settings.working_directory,
        )
        result = JspcResult(report=report)

        if settings.options.compile and is_war:
            result.copied_artifacts = copy_class_files(
                settings.working_directory, self.project.output_directory
            )

        if is_war and settings.include_in_project:
            merger = DescriptorMerger(
                marker=settings.inject_string,
                filtering=settings.filtering,
                properties=self.project.properties,
                strategy=load_merge_strategy(settings.merge_strategy),
            )
            result.merge = merger.merge(
                settings.input_web_xml,
                settings.web_fragment_file,
                settings.output_web_xml,
            )
            self.project.add_compile_source_root(settings.working_directory)
            result.source_root = settings.working_directory
        return result

    def _resolve_compiler(self) -> JspCompiler:
        if self._compiler is not None:
            return self._compiler
        compiler_settings = self.settings.compiler
        return load_compiler(
            compiler_settings.kind,
            self.settings.options,
            compiler_settings.constructor_kwargs(),
        )


__all__ = ["JspcOrchestrator", "load_config"]
