# Copyright (c) Meta Platforms, Inc. and affiliates.
# Modifications copyright (c) 2025 Logan Martel.
# Adapted from https://github.com/meta-pytorch/KernelAgent (Apache-2.0).

"""Logging helpers (console setup, rotating build logs)."""

from __future__ import annotations

import logging

from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_console(verbose: bool = False) -> None:
    """Install a basic console handler unless one is already present."""

    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)


def setup_file_logger(log_file: Path, name: str = "jspc") -> logging.Logger:
    """Configure a rotating file logger (idempotent per file)."""

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    marker = str(log_file)
    if not any(
        isinstance(handler, RotatingFileHandler)
        and getattr(handler, "_jspc_tag", None) == marker
        for handler in logger.handlers
    ):
        handler = RotatingFileHandler(
            log_file, maxBytes=2_000_000, backupCount=3
        )
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        )
        handler._jspc_tag = marker  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
