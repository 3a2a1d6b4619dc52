"""Typed helpers for parsing jspc configuration dictionaries."""

from __future__ import annotations

import os

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from jspc.constants import (
    DEFAULT_BUILD_DIRECTORY,
    DEFAULT_COMPILER,
    DEFAULT_INJECT_STRING,
    DEFAULT_INPUT_WEB_XML,
    DEFAULT_JSPC_MAIN_CLASS,
    DEFAULT_MERGE_STRATEGY,
    DEFAULT_OUTPUT_DIRECTORY,
    DEFAULT_OUTPUT_WEB_XML,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_PACKAGING,
    DEFAULT_WEB_FRAGMENT_FILE,
    DEFAULT_WORKING_DIRECTORY,
    ENV_SKIP,
)
from jspc.exceptions import ConfigurationError
from jspc.project import ProjectModel
from jspc.sources import FileSet
from jspc.types import CompilerOptions

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _ensure_path(
    value: Optional[str | Path],
    *,
    base: Path,
    default: Optional[Path] = None,
) -> Path:
    if value is None:
        if default is None:
            raise ConfigurationError("Path value is required")
        return default
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _coerce_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")


def _flag(cfg: Mapping[str, Any], key: str, default: bool) -> bool:
    if cfg.get(key) is None:
        return default
    return _coerce_bool(cfg[key], key=key)


def _string_tuple(value: Any) -> Tuple[str, ...]:
    if not value:
        return tuple()
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    return (str(value),)


@dataclass(frozen=True)
class CompilerSettings:
    kind: str = DEFAULT_COMPILER
    java: Optional[str] = None
    main_class: str = DEFAULT_JSPC_MAIN_CLASS
    classpath: Tuple[str, ...] = field(default_factory=tuple)

    def constructor_kwargs(self) -> Dict[str, Any]:
        return {
            "java": self.java,
            "main_class": self.main_class,
            "classpath": self.classpath,
        }


@dataclass(frozen=True)
class JspcSettings:
    project: ProjectModel
    working_directory: Path
    web_fragment_file: Path
    input_web_xml: Path
    output_web_xml: Path
    sources: Optional[FileSet] = None
    skip: bool = False
    java_encoding: Optional[str] = None
    package_name: str = DEFAULT_PACKAGE_NAME
    inject_string: str = DEFAULT_INJECT_STRING
    filtering: bool = True
    include_in_project: bool = True
    runtime_root: Optional[Path] = None
    merge_strategy: str = DEFAULT_MERGE_STRATEGY
    options: CompilerOptions = field(default_factory=CompilerOptions)
    compiler: CompilerSettings = field(default_factory=CompilerSettings)


def build_project_model(
    project_cfg: Mapping[str, Any], *, config_root: Path
) -> ProjectModel:
    basedir = _ensure_path(
        project_cfg.get("basedir"), base=config_root, default=config_root.resolve()
    )
    build_directory = _ensure_path(
        project_cfg.get("build_directory", DEFAULT_BUILD_DIRECTORY),
        base=basedir,
    )
    output_directory = _ensure_path(
        project_cfg.get("output_directory"),
        base=basedir,
        default=build_directory / DEFAULT_OUTPUT_DIRECTORY,
    )
    properties = {
        str(key): "" if value is None else str(value)
        for key, value in (project_cfg.get("properties") or {}).items()
    }
    return ProjectModel(
        basedir=basedir,
        build_directory=build_directory,
        output_directory=output_directory,
        packaging=str(project_cfg.get("packaging", DEFAULT_PACKAGING)),
        properties=properties,
        classpath_elements=list(_string_tuple(project_cfg.get("classpath"))),
    )


def _build_file_set(
    sources_cfg: Optional[Mapping[str, Any]], *, basedir: Path
) -> Optional[FileSet]:
    if not sources_cfg:
        return None
    directory = sources_cfg.get("directory")
    if not directory:
        raise ConfigurationError("sources.directory is required")
    return FileSet(
        directory=_ensure_path(directory, base=basedir),
        includes=_string_tuple(sources_cfg.get("includes")),
        excludes=_string_tuple(sources_cfg.get("excludes")),
        use_default_excludes=_flag(sources_cfg, "use_default_excludes", True),
    )


def _build_compiler_options(jspc_cfg: Mapping[str, Any]) -> CompilerOptions:
    return CompilerOptions(
        verbose=int(jspc_cfg.get("verbose") or 0),
        show_success=_flag(jspc_cfg, "show_success", True),
        list_errors=_flag(jspc_cfg, "list_errors", True),
        smap_dumped=_flag(jspc_cfg, "smap_dumped", False),
        smap_suppressed=_flag(jspc_cfg, "smap_suppressed", False),
        validate_xml=_flag(jspc_cfg, "validate_xml", False),
        trim_spaces=_flag(jspc_cfg, "trim_spaces", True),
        error_on_use_bean_invalid_class_attribute=_flag(
            jspc_cfg, "error_on_use_bean_invalid_class_attribute", True
        ),
        compile=_flag(jspc_cfg, "compile", True),
        source_vm=jspc_cfg.get("source"),
        target_vm=jspc_cfg.get("target"),
    )


def build_jspc_settings(
    config: Mapping[str, Any],
    *,
    config_root: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> JspcSettings:
    """Parse the ``project`` and ``jspc`` sections of a config mapping."""

    env = os.environ if environ is None else environ
    project = build_project_model(
        config.get("project") or {}, config_root=config_root
    )
    jspc_cfg = config.get("jspc") or {}
    build_dir = project.build_directory

    skip = _flag(jspc_cfg, "skip", False)
    if env.get(ENV_SKIP):
        skip = _coerce_bool(env[ENV_SKIP], key=ENV_SKIP)

    runtime_root = jspc_cfg.get("runtime_root")
    compiler_cfg = jspc_cfg.get("compiler") or {}
    compiler = CompilerSettings(
        kind=str(compiler_cfg.get("kind", DEFAULT_COMPILER)),
        java=compiler_cfg.get("java"),
        main_class=str(compiler_cfg.get("main_class", DEFAULT_JSPC_MAIN_CLASS)),
        classpath=tuple(
            str(_ensure_path(entry, base=project.basedir))
            for entry in _string_tuple(compiler_cfg.get("classpath"))
        ),
    )

    return JspcSettings(
        project=project,
        working_directory=_ensure_path(
            jspc_cfg.get("working_directory"),
            base=project.basedir,
            default=build_dir / DEFAULT_WORKING_DIRECTORY,
        ),
        web_fragment_file=_ensure_path(
            jspc_cfg.get("web_fragment_file"),
            base=project.basedir,
            default=build_dir / DEFAULT_WEB_FRAGMENT_FILE,
        ),
        input_web_xml=_ensure_path(
            jspc_cfg.get("input_web_xml"),
            base=project.basedir,
            default=project.basedir / DEFAULT_INPUT_WEB_XML,
        ),
        output_web_xml=_ensure_path(
            jspc_cfg.get("output_web_xml"),
            base=project.basedir,
            default=build_dir / DEFAULT_OUTPUT_WEB_XML,
        ),
        sources=_build_file_set(jspc_cfg.get("sources"), basedir=project.basedir),
        skip=skip,
        java_encoding=jspc_cfg.get("java_encoding"),
        package_name=str(jspc_cfg.get("package_name") or DEFAULT_PACKAGE_NAME),
        inject_string=str(jspc_cfg.get("inject_string") or DEFAULT_INJECT_STRING),
        filtering=_flag(jspc_cfg, "filtering", True),
        include_in_project=_flag(jspc_cfg, "include_in_project", True),
        runtime_root=(
            _ensure_path(runtime_root, base=project.basedir)
            if runtime_root
            else None
        ),
        merge_strategy=str(jspc_cfg.get("merge_strategy", DEFAULT_MERGE_STRATEGY)),
        options=_build_compiler_options(jspc_cfg),
        compiler=compiler,
    )


__all__ = [
    "CompilerSettings",
    "JspcSettings",
    "build_jspc_settings",
    "build_project_model",
]
