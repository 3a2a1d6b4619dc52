"""Runtime helpers (execution context, tool discovery)."""

from .context import (
    ExecutionContext,
    activated_context,
    active_context,
    root_context,
    set_active_context,
)
from .tools import (
    TOOL_PATH_TEMPLATES,
    locate_tool,
    os_family,
    register_tool_path,
    resolve_runtime_root,
    unregister_tool_path,
)

__all__ = [
    "ExecutionContext",
    "activated_context",
    "active_context",
    "root_context",
    "set_active_context",
    "TOOL_PATH_TEMPLATES",
    "locate_tool",
    "os_family",
    "register_tool_path",
    "resolve_runtime_root",
    "unregister_tool_path",
]
