"""Encoding detection for XML deployment descriptors."""

from __future__ import annotations

import codecs
import locale
import re

from typing import Optional

from jspc.constants import DEFAULT_XML_ENCODING, ENCODING_SCAN_CHARS

_XML_DECLARATION = re.compile(
    r"""<\?xml .*encoding\s*=\s*["']([^"']+)["'].*\?>"""
)


def platform_encoding() -> str:
    return locale.getpreferredencoding(False)


def declared_encoding(text: str) -> Optional[str]:
    """Return the encoding named in the XML declaration, if any."""

    match = _XML_DECLARATION.search(text[:ENCODING_SCAN_CHARS])
    if match:
        return match.group(1)
    return None


def detect_encoding(text: str) -> str:
    return declared_encoding(text) or DEFAULT_XML_ENCODING


def same_codec(left: str, right: str) -> bool:
    """Compare two encoding labels by their normalised codec name."""

    try:
        return codecs.lookup(left).name == codecs.lookup(right).name
    except LookupError:
        return left.lower() == right.lower()


__all__ = [
    "declared_encoding",
    "detect_encoding",
    "platform_encoding",
    "same_codec",
]
