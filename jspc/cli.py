"""CLI entrypoint for the JSP precompiler."""

from __future__ import annotations

import argparse
import logging
import sys

from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from jspc.configuration import build_jspc_settings
from jspc.exceptions import JspcError
from jspc.logging import configure_console, setup_file_logger
from jspc.orchestrator import JspcOrchestrator, load_config

DEFAULT_CONFIG_PATH = Path("jspc.yaml")
LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Precompile JSP pages and merge the generated servlet "
            "mappings into web.xml."
        )
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML config (default: ./jspc.yaml).",
    )
    parser.add_argument(
        "--basedir",
        type=str,
        help="Override the project base directory.",
    )
    parser.add_argument(
        "--packaging",
        type=str,
        help="Override the project packaging (e.g. war, jar).",
    )
    parser.add_argument(
        "--runtime-root",
        type=str,
        help="Java runtime root used to locate tools.jar (default: $JAVA_HOME).",
    )
    parser.add_argument(
        "--inject-string",
        type=str,
        help="Marker in web.xml replaced by the generated fragment.",
    )
    parser.add_argument(
        "--package-name",
        type=str,
        help="Package for the generated servlet classes.",
    )
    parser.add_argument(
        "--no-filtering",
        action="store_true",
        help="Do not interpolate ${key} and @key@ in the merged web.xml.",
    )
    parser.add_argument(
        "--no-compile",
        action="store_true",
        help="Generate sources only; do not compile or copy classes.",
    )
    parser.add_argument(
        "--exclude-from-project",
        action="store_true",
        help="Leave web.xml and the project source roots untouched.",
    )
    parser.add_argument(
        "--skip",
        action="store_true",
        help="Disable precompilation for this run.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write a rotating debug log to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _apply_cli_overrides(
    args: argparse.Namespace, config: Dict[str, Any]
) -> Dict[str, Any]:
    project_cfg = config.setdefault("project", {})
    jspc_cfg = config.setdefault("jspc", {})
    if args.basedir:
        project_cfg["basedir"] = args.basedir
    if args.packaging:
        project_cfg["packaging"] = args.packaging
    if args.runtime_root:
        jspc_cfg["runtime_root"] = args.runtime_root
    if args.inject_string:
        jspc_cfg["inject_string"] = args.inject_string
    if args.package_name:
        jspc_cfg["package_name"] = args.package_name
    if args.no_filtering:
        jspc_cfg["filtering"] = False
    if args.no_compile:
        jspc_cfg["compile"] = False
    if args.exclude_from_project:
        jspc_cfg["include_in_project"] = False
    if args.skip:
        jspc_cfg["skip"] = True
    return config


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    configure_console(args.verbose)
    if args.log_file:
        setup_file_logger(Path(args.log_file))

    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    try:
        if args.config or config_path.exists():
            config_data = load_config(config_path)
            config_root = config_path.resolve().parent
        else:
            config_data = {}
            config_root = Path.cwd()
        config_data = _apply_cli_overrides(args, config_data)
        settings = build_jspc_settings(config_data, config_root=config_root)
        result = JspcOrchestrator(settings).execute()
    except (JspcError, OSError) as exc:
        LOGGER.error("%s", exc)
        return 1

    if result is not None and result.merge is not None:
        print(f"Merged web.xml written to {result.merge.path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
