"""Locate the platform support archive the page translator needs."""

from __future__ import annotations

import logging
import os
import sys

from pathlib import Path
from typing import Dict, Mapping, Optional

from jspc.constants import ENV_RUNTIME_ROOT
from jspc.exceptions import ConfigurationError, ToolNotFoundError
from jspc.types import ResolvedTool

LOGGER = logging.getLogger(__name__)

DEFAULT_TOOL_PATH_TEMPLATE = "../lib/tools.jar"

TOOL_PATH_TEMPLATES: Dict[str, str] = {
    "mac": "../Classes/classes.jar",
}


def register_tool_path(family: str, template: str) -> None:
    """Register or override the archive location for an OS family."""

    TOOL_PATH_TEMPLATES[family.lower()] = template


def unregister_tool_path(family: str) -> None:
    """Drop a family so it falls back to the default template."""

    TOOL_PATH_TEMPLATES.pop(family.lower(), None)


def os_family(platform: Optional[str] = None) -> str:
    """Map a ``sys.platform`` value onto an OS family name."""

    value = (platform or sys.platform).lower()
    if value == "darwin":
        return "mac"
    if value.startswith(("win32", "cygwin", "msys")):
        return "windows"
    return "unix"


def tool_path_template(family: str) -> str:
    return TOOL_PATH_TEMPLATES.get(family.lower(), DEFAULT_TOOL_PATH_TEMPLATE)


def resolve_runtime_root(
    configured: Optional[str | Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Return the runtime install root from config or the environment."""

    if configured:
        return Path(configured).expanduser()
    env = os.environ if environ is None else environ
    value = env.get(ENV_RUNTIME_ROOT)
    if not value:
        raise ConfigurationError(
            f"Runtime root is not configured and {ENV_RUNTIME_ROOT} is unset"
        )
    root = Path(value).expanduser()
    # JAVA_HOME names the JDK; the runtime root is its bundled JRE when present.
    jre = root / "jre"
    if jre.is_dir():
        return jre
    return root


def locate_tool(runtime_root: Path, family: Optional[str] = None) -> ResolvedTool:
    """Resolve the support archive relative to ``runtime_root``."""

    template = tool_path_template(family or os_family())
    path = (Path(runtime_root) / template).resolve()
    if not path.is_file():
        raise ToolNotFoundError(path)
    LOGGER.debug("Using tools archive: %s", path)
    return ResolvedTool(path=path)


__all__ = [
    "DEFAULT_TOOL_PATH_TEMPLATE",
    "TOOL_PATH_TEMPLATES",
    "locate_tool",
    "os_family",
    "register_tool_path",
    "resolve_runtime_root",
    "tool_path_template",
    "unregister_tool_path",
]
