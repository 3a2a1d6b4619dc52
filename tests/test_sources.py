from __future__ import annotations

from pathlib import Path

import pytest

from jspc.sources import FileSet, compile_pattern, included_paths, resolve_files


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("<%@ page %>")


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("**/*.jsp", "index.jsp", True),
        ("**/*.jsp", "a/b/index.jsp", True),
        ("*.jsp", "a/index.jsp", False),
        ("WEB-INF/**", "WEB-INF/tags/x.tag", True),
        ("WEB-INF/", "WEB-INF/web.xml", True),
        ("page?.jsp", "page1.jsp", True),
        ("page?.jsp", "page10.jsp", False),
        ("**/.svn/**", "a/.svn/entries", True),
    ],
)
def test_compile_pattern(pattern: str, path: str, expected: bool) -> None:
    assert bool(compile_pattern(pattern).match(path)) is expected


def test_resolve_files_applies_includes_and_excludes(tmp_path: Path) -> None:
    _touch(
        tmp_path,
        "index.jsp",
        "admin/users.jsp",
        "admin/draft.jsp",
        "css/site.css",
        ".svn/index.jsp",
        "index.jsp~",
    )
    file_set = FileSet(
        directory=tmp_path,
        includes=("**/*.jsp", "**/*.jsp~"),
        excludes=("**/draft.jsp",),
    )
    assert resolve_files(file_set) == [Path("admin/users.jsp"), Path("index.jsp")]


def test_default_excludes_can_be_disabled(tmp_path: Path) -> None:
    _touch(tmp_path, ".svn/index.jsp")
    file_set = FileSet(
        directory=tmp_path, includes=("**/*.jsp",), use_default_excludes=False
    )
    assert resolve_files(file_set) == [Path(".svn/index.jsp")]


def test_included_paths_requires_includes(tmp_path: Path) -> None:
    _touch(tmp_path, "index.jsp")
    assert included_paths(FileSet(directory=tmp_path)) == []
    assert included_paths(None) == []
    assert included_paths(
        FileSet(directory=tmp_path, includes=("**/*.jsp",))
    ) == [tmp_path / "index.jsp"]


def test_missing_directory_yields_nothing(tmp_path: Path) -> None:
    file_set = FileSet(directory=tmp_path / "absent", includes=("**",))
    assert resolve_files(file_set) == []
