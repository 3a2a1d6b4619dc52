"""jspc package entry point."""

from .exceptions import (
    CompilationError,
    ConfigurationError,
    JspcError,
    MissingMarkerError,
    ToolNotFoundError,
)
from .orchestrator import JspcOrchestrator
from .types import (
    CompilationReport,
    CompilationRequest,
    CompilerOptions,
    JspcResult,
    MergeResult,
    ResolvedTool,
)

__all__ = [
    "CompilationError",
    "CompilationReport",
    "CompilationRequest",
    "CompilerOptions",
    "ConfigurationError",
    "JspcError",
    "JspcOrchestrator",
    "JspcResult",
    "MergeResult",
    "MissingMarkerError",
    "ResolvedTool",
    "ToolNotFoundError",
]
