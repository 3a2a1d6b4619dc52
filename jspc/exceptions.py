"""Custom exceptions for the page precompilation pipeline."""

from __future__ import annotations

from pathlib import Path


class JspcError(RuntimeError):
    """Base exception for orchestration failures."""


class ConfigurationError(JspcError):
    """Raised when a required setting is missing or invalid."""


class ToolNotFoundError(JspcError):
    """Raised when the platform support archive is absent."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Missing tools archive at: {path}")
        self.path = path


class CompilationError(JspcError):
    """Raised when the page translator reports a failure."""


class MergeError(JspcError):
    """Base exception for descriptor merge failures."""


class MissingMarkerError(MergeError):
    """Raised when the descriptor lacks the configured injection point."""

    def __init__(self, marker: str, path: Path) -> None:
        super().__init__(f'Missing inject string: "{marker}" in: {path}')
        self.marker = marker
        self.path = path


class UnsupportedEncodingError(MergeError):
    """Raised when a descriptor declares an encoding Python cannot decode."""

    def __init__(self, encoding: str, path: Path) -> None:
        super().__init__(f"Unsupported encoding '{encoding}' declared in: {path}")
        self.encoding = encoding
        self.path = path
