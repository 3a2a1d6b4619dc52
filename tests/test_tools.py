from __future__ import annotations

from pathlib import Path

import pytest

from jspc.exceptions import ConfigurationError, ToolNotFoundError
from jspc.runtime.tools import (
    DEFAULT_TOOL_PATH_TEMPLATE,
    TOOL_PATH_TEMPLATES,
    locate_tool,
    os_family,
    register_tool_path,
    resolve_runtime_root,
    tool_path_template,
    unregister_tool_path,
)


@pytest.mark.parametrize(
    "platform, family",
    [("darwin", "mac"), ("win32", "windows"), ("linux", "unix"), ("freebsd13", "unix")],
)
def test_os_family(platform: str, family: str) -> None:
    assert os_family(platform) == family


def test_locate_tool_default_family(runtime_root: Path) -> None:
    tool = locate_tool(runtime_root, "unix")
    assert tool.path == (runtime_root.parent / "lib" / "tools.jar").resolve()
    assert tool.path.parts[-2:] == ("lib", "tools.jar")
    assert tool.uri.startswith("file://")


def test_locate_tool_mac_suffix(tmp_path: Path) -> None:
    home = tmp_path / "jvm" / "Home"
    home.mkdir(parents=True)
    archive = tmp_path / "jvm" / "Classes" / "classes.jar"
    archive.parent.mkdir(parents=True)
    archive.write_bytes(b"PK")
    (tmp_path / "jvm" / "lib").mkdir()
    (tmp_path / "jvm" / "lib" / "tools.jar").write_bytes(b"PK")

    mac = locate_tool(home, "mac")
    other = locate_tool(home, "windows")
    assert mac.path.parts[-2:] == ("Classes", "classes.jar")
    assert other.path.parts[-2:] == ("lib", "tools.jar")


def test_locate_tool_missing_reports_path(tmp_path: Path) -> None:
    with pytest.raises(ToolNotFoundError) as excinfo:
        locate_tool(tmp_path / "jre", "unix")
    expected = (tmp_path / "lib" / "tools.jar").resolve()
    assert excinfo.value.path == expected
    assert str(expected) in str(excinfo.value)


def test_register_tool_path_extends_table(runtime_root: Path) -> None:
    (runtime_root / "support.jar").write_bytes(b"PK")
    register_tool_path("Plan9", "support.jar")
    try:
        assert tool_path_template("plan9") == "support.jar"
        assert locate_tool(runtime_root, "plan9").path.name == "support.jar"
    finally:
        unregister_tool_path("plan9")
    assert "plan9" not in TOOL_PATH_TEMPLATES
    assert tool_path_template("plan9") == DEFAULT_TOOL_PATH_TEMPLATE


def test_resolve_runtime_root_prefers_config(tmp_path: Path) -> None:
    env = {"JAVA_HOME": "/opt/java"}
    assert resolve_runtime_root(tmp_path, environ=env) == tmp_path
    assert resolve_runtime_root(None, environ=env) == Path("/opt/java")
    with pytest.raises(ConfigurationError):
        resolve_runtime_root(None, environ={})


def test_java_home_jdk_layout_uses_bundled_jre(tmp_path: Path) -> None:
    jdk = tmp_path / "jdk"
    (jdk / "jre").mkdir(parents=True)
    (jdk / "lib").mkdir()
    (jdk / "lib" / "tools.jar").write_bytes(b"PK")

    root = resolve_runtime_root(None, environ={"JAVA_HOME": str(jdk)})
    assert root == jdk / "jre"
    tool = locate_tool(root, "unix")
    assert tool.path == (jdk / "lib" / "tools.jar").resolve()


def test_java_home_without_jre_is_used_as_is(tmp_path: Path) -> None:
    jre = tmp_path / "jre"
    jre.mkdir()
    assert resolve_runtime_root(None, environ={"JAVA_HOME": str(jre)}) == jre
