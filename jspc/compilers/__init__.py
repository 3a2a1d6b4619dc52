"""Page translator registry."""

from typing import Any, Dict, Optional, Type

from jspc.exceptions import ConfigurationError
from jspc.types import CompilerOptions

from .base import JspCompiler
from .jasper import JasperJspCompiler

COMPILERS: Dict[str, Type[Any]] = {
    "jasper": JasperJspCompiler,
}


def register_compiler(name: str, compiler_cls: Type[Any]) -> None:
    """Register or override a translator implementation at runtime."""

    COMPILERS[name.lower()] = compiler_cls


def unregister_compiler(name: str) -> None:
    """Remove a translator implementation that was previously registered."""

    COMPILERS.pop(name.lower(), None)


def load_compiler(
    kind: str,
    options: CompilerOptions,
    settings: Optional[Dict[str, Any]] = None,
) -> JspCompiler:
    """Instantiate the translator registered under ``kind``."""

    compiler_cls = COMPILERS.get(kind.lower())
    if compiler_cls is None:
        raise ConfigurationError(f"Unknown compiler '{kind}'")
    return compiler_cls(options, **(settings or {}))


__all__ = [
    "COMPILERS",
    "JasperJspCompiler",
    "JspCompiler",
    "load_compiler",
    "register_compiler",
    "unregister_compiler",
]
