# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

#src/clarify_launcher/logging/log.py

from __future__ import annotations

import logging
import os
import socket
import uuid
from datetime import datetime, timezone
from pathlib import Path

LOGGER_NAME = "clarify_launcher"

_FORMAT = logging.Formatter(
    "%(asctime)s | %(levelname)-7s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def default_log_dir() -> Path:
    return Path.home() / ".clarify-launcher" / "logs"


def run_log_path(base_dir: Path, run_id: str, hostname: str | None = None) -> Path:
    """<base_dir>/<hostname>-<utc timestamp>-<run_id>.log, one file per launch."""
    host = hostname or socket.gethostname() or "unknown-host"
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return base_dir / f"{host}-{ts}-{run_id}.log"


def reset_logging(name: str = LOGGER_NAME) -> None:
    """Close and detach every handler init_logging attached."""
    logger = logging.getLogger(name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(_FORMAT)
    return handler


def init_logging(
    *,
    base_dir: Path | None = None,
    name: str = LOGGER_NAME,
    verbose: bool = False,
) -> tuple[logging.Logger, str, Path]:
    """
    Route the launcher logger to a per-run file (always DEBUG) and to stderr
    (INFO, or DEBUG with --debug). Calling it again replaces the previous
    run's handlers.

    Returns (logger, run_id, log_path); run_id is shared with the event
    observers so the .log and .jsonl files of one launch pair up.
    """
    run_id = str(uuid.uuid4())
    base_dir = base_dir or default_log_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    log_path = run_log_path(base_dir, run_id)

    reset_logging(name)
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(_handler(logging.FileHandler(log_path), logging.DEBUG))
    logger.addHandler(_handler(logging.StreamHandler(), logging.DEBUG if verbose else logging.INFO))

    logger.debug(f"clarify-launcher run {run_id} started (pid={os.getpid()}, log={log_path})")
    return logger, run_id, log_path
