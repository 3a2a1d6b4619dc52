"""Assemble the command-line tokens handed to the page translator."""

from __future__ import annotations

import os

from typing import List

from jspc.exceptions import ConfigurationError
from jspc.types import CompilationRequest


def build_arguments(request: CompilationRequest) -> List[str]:
    """Return the ordered option/value tokens for ``request``.

    The order is fixed: root, output, optional encoding, boolean switches,
    fragment path, package, class path and finally the source files.
    """

    if not request.source_root or not str(request.source_root).strip():
        raise ConfigurationError("Source directory is required")
    if not request.output_directory or not str(request.output_directory).strip():
        raise ConfigurationError("Output directory is required")

    args: List[str] = ["-uriroot", str(request.source_root)]
    args += ["-d", str(request.output_directory)]
    if request.encoding:
        args += ["-javaEncoding", request.encoding]
    if request.options.show_success:
        args.append("-s")
    if request.options.list_errors:
        args.append("-l")
    args += ["-webinc", str(request.web_fragment_file.absolute())]
    args += ["-p", request.package_name]
    args += ["-classpath", os.pathsep.join(request.classpath)]
    args.extend(str(path) for path in request.source_files)
    return args


__all__ = ["build_arguments"]
