"""Shared fixtures for the jspc test-suite."""

from __future__ import annotations

import sys

from pathlib import Path
from typing import List, Sequence

import pytest

from jspc.runtime.context import active_context

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class RecordingCompiler:
    """Stand-in translator that records calls and the active class path."""

    def __init__(self, *, fragment: str = "", error: Exception | None = None):
        self.calls: List[List[str]] = []
        self.contexts = []
        self.fragment = fragment
        self.error = error

    def compile(self, arguments: Sequence[str]) -> None:
        self.calls.append(list(arguments))
        self.contexts.append(active_context())
        if self.error is not None:
            raise self.error
        args = list(arguments)
        if "-webinc" in args:
            fragment_path = Path(args[args.index("-webinc") + 1])
            fragment_path.parent.mkdir(parents=True, exist_ok=True)
            fragment_path.write_text(self.fragment)
        if "-d" in args:
            out_dir = Path(args[args.index("-d") + 1])
            class_file = out_dir / "jsp" / "index_jsp.class"
            class_file.parent.mkdir(parents=True, exist_ok=True)
            class_file.write_bytes(b"\xca\xfe\xba\xbe")


@pytest.fixture()
def recording_compiler() -> RecordingCompiler:
    return RecordingCompiler(
        fragment="<servlet><servlet-name>jsp.index_jsp</servlet-name></servlet>\n"
    )


@pytest.fixture()
def runtime_root(tmp_path: Path) -> Path:
    """A fake Java runtime root whose ``../lib/tools.jar`` exists."""

    jdk = tmp_path / "jdk"
    (jdk / "jre").mkdir(parents=True)
    (jdk / "lib").mkdir(parents=True)
    (jdk / "lib" / "tools.jar").write_bytes(b"PK")
    return jdk / "jre"


@pytest.fixture()
def compiler_factory():
    """Return the recording compiler class for tests that need a variant."""

    return RecordingCompiler
