"""``${key}`` and ``@key@`` property interpolation."""

from __future__ import annotations

import re

from typing import List, Mapping

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def interpolate(
    text: str,
    properties: Mapping[str, object],
    begin: str,
    end: str,
) -> str:
    """Replace ``begin + key + end`` tokens with mapped values.

    Keys without a value are left verbatim, delimiters included, and
    scanning resumes after their closing ``end`` token.
    """

    out: List[str] = []
    pos = 0
    while True:
        start = text.find(begin, pos)
        if start < 0:
            out.append(text[pos:])
            break
        key_start = start + len(begin)
        stop = text.find(end, key_start)
        if stop < 0:
            out.append(text[pos:])
            break
        key = text[key_start:stop]
        value = properties.get(key) if key else None
        if value is None:
            out.append(text[pos:stop + len(end)])
            pos = stop + len(end)
            continue
        out.append(text[pos:start])
        out.append(str(value))
        pos = stop + len(end)
    return "".join(out)


def split_lines(text: str) -> List[str]:
    """Split like a line reader: any line break, no trailing empty line."""

    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def filter_text(text: str, properties: Mapping[str, object]) -> str:
    """Apply both interpolation passes line by line.

    Lines are rejoined with ``\\n`` so mixed line endings are normalised.
    """

    filtered = []
    for line in split_lines(text):
        line = interpolate(line, properties, "${", "}")
        line = interpolate(line, properties, "@", "@")
        filtered.append(line)
    return "\n".join(filtered)


__all__ = ["filter_text", "interpolate", "split_lines"]
