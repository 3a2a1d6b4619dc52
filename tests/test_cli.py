from __future__ import annotations

import logging

from pathlib import Path
from typing import List

import pytest
import yaml

from jspc.cli import main
from jspc.compilers import COMPILERS


class _WritingCompiler:
    calls: List[List[str]] = []

    def __init__(self, options, **kwargs):
        self.options = options

    def compile(self, arguments):
        args = list(arguments)
        type(self).calls.append(args)
        fragment = Path(args[args.index("-webinc") + 1])
        fragment.parent.mkdir(parents=True, exist_ok=True)
        fragment.write_text("<servlet/>\n")


@pytest.fixture()
def fake_jasper(monkeypatch):
    _WritingCompiler.calls = []
    monkeypatch.setitem(COMPILERS, "jasper", _WritingCompiler)
    monkeypatch.setattr("jspc.orchestrator.os_family", lambda: "unix")
    monkeypatch.delenv("JSPC_SKIP", raising=False)
    return _WritingCompiler


def _write_config(tmp_path: Path, runtime_root: Path) -> Path:
    web_inf = tmp_path / "src" / "main" / "webapp" / "WEB-INF"
    web_inf.mkdir(parents=True)
    (web_inf / "web.xml").write_text(
        "<web-app>\n<!-- JSPC -->\n</web-app>\n", encoding="utf-8"
    )
    (web_inf.parent / "index.jsp").write_text("<html/>")
    config = {
        "project": {"basedir": "."},
        "jspc": {
            "runtime_root": str(runtime_root),
            "sources": {"directory": "src/main/webapp", "includes": ["**/*.jsp"]},
        },
    }
    path = tmp_path / "jspc.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


def test_cli_runs_pipeline(tmp_path: Path, runtime_root: Path, fake_jasper, capsys):
    config_path = _write_config(tmp_path, runtime_root)
    exit_code = main(
        ["--config", str(config_path), "--inject-string", "<!-- JSPC -->"]
    )
    assert exit_code == 0
    output = tmp_path / "target" / "jspweb.xml"
    assert output.read_text(encoding="utf-8") == (
        "<web-app>\n<servlet/>\n\n</web-app>"
    )
    assert "Merged web.xml written to" in capsys.readouterr().out
    assert len(fake_jasper.calls) == 1


def test_cli_skip(tmp_path: Path, runtime_root: Path, fake_jasper):
    config_path = _write_config(tmp_path, runtime_root)
    assert main(["--config", str(config_path), "--skip"]) == 0
    assert fake_jasper.calls == []


def test_cli_reports_missing_marker(tmp_path: Path, runtime_root: Path, fake_jasper):
    config_path = _write_config(tmp_path, runtime_root)
    assert main(["--config", str(config_path), "--inject-string", "<!-- X -->"]) == 1
    assert not (tmp_path / "target" / "jspweb.xml").exists()


def test_cli_missing_config(tmp_path: Path, fake_jasper):
    assert main(["--config", str(tmp_path / "absent.yaml")]) == 1


def test_cli_writes_log_file(tmp_path: Path, runtime_root: Path, fake_jasper):
    config_path = _write_config(tmp_path, runtime_root)
    log_file = tmp_path / "logs" / "jspc.log"
    exit_code = main(
        [
            "--config",
            str(config_path),
            "--exclude-from-project",
            "--log-file",
            str(log_file),
        ]
    )
    logger = logging.getLogger("jspc")
    for handler in list(logger.handlers):
        if getattr(handler, "_jspc_tag", None) == str(log_file):
            handler.close()
            logger.removeHandler(handler)
    assert exit_code == 0
    assert "Compiling 1 JSP source file to" in log_file.read_text()
    assert not (tmp_path / "target" / "jspweb.xml").exists()
