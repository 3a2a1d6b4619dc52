"""Merge the translator's fragment into the application's web.xml."""

from __future__ import annotations

import logging

from pathlib import Path
from typing import Mapping, Optional

from jspc.constants import DEFAULT_INJECT_STRING
from jspc.exceptions import UnsupportedEncodingError
from jspc.types import MergeResult, WebDescriptor, WebFragment

from .encoding import detect_encoding, platform_encoding, same_codec
from .interpolation import filter_text
from .strategies import MarkerInjectionStrategy, MergeStrategy

LOGGER = logging.getLogger(__name__)


def _require_file(path: Path, label: str) -> None:
    if not path.is_file():
        raise FileNotFoundError(f"{label} {path} does not exist")


def read_descriptor(path: Path, marker: str = DEFAULT_INJECT_STRING) -> WebDescriptor:
    """Read ``path`` and decode it with the encoding it declares.

    The bytes are first decoded with the platform default; when the XML
    declaration names a different codec they are decoded again with it.
    """

    path = Path(path)
    _require_file(path, "Web descriptor")
    raw = path.read_bytes()
    default = platform_encoding()
    text = raw.decode(default, errors="replace")
    encoding = detect_encoding(text)
    if not same_codec(encoding, default):
        try:
            text = raw.decode(encoding, errors="replace")
        except LookupError as exc:
            raise UnsupportedEncodingError(encoding, path) from exc
    return WebDescriptor(path=path, text=text, encoding=encoding, marker=marker)


def read_fragment(path: Path) -> WebFragment:
    # The fragment is always read with the platform default encoding.
    path = Path(path)
    _require_file(path, "Web fragment")
    return WebFragment(
        path=path,
        text=path.read_text(encoding=platform_encoding(), errors="replace"),
    )


def write_output(path: Path, text: str, encoding: str) -> MergeResult:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open(
        "w", encoding=encoding, errors="replace", newline=""
    ) as handle:
        handle.write(text)
    return MergeResult(path=path, text=text, encoding=encoding)


class DescriptorMerger:
    """Reads, splices, optionally filters and writes a deployment descriptor."""

    def __init__(
        self,
        *,
        marker: str = DEFAULT_INJECT_STRING,
        filtering: bool = True,
        properties: Optional[Mapping[str, object]] = None,
        strategy: Optional[MergeStrategy] = None,
    ) -> None:
        self.marker = marker
        self.filtering = filtering
        self.properties = dict(properties or {})
        self.strategy = strategy or MarkerInjectionStrategy()

    def merge(
        self,
        input_web_xml: Path,
        web_fragment_file: Path,
        output_web_xml: Path,
    ) -> MergeResult:
        descriptor = read_descriptor(input_web_xml, self.marker)
        LOGGER.debug(
            "Read %s using encoding %s", descriptor.path, descriptor.encoding
        )
        fragment = read_fragment(web_fragment_file)
        output = self.strategy.merge(descriptor, fragment)
        if self.filtering:
            output = filter_text(output, self.properties)
        result = write_output(output_web_xml, output, descriptor.encoding)
        LOGGER.info("Wrote merged web.xml to %s", result.path)
        return result


__all__ = [
    "DescriptorMerger",
    "read_descriptor",
    "read_fragment",
    "write_output",
]
