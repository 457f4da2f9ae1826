"""Project-wide logging setup.

Logs go to text/log_file.log unless POKER_LOG_FILE is set, plus stdout.
Safe to call more than once: existing handlers are detected and reused.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_PATH = Path(__file__).resolve().parent.parent / "text" / "log_file.log"


def resolve_log_path() -> Path:
    override = os.getenv("POKER_LOG_FILE")
    if override is None or override.strip() == "":
        return DEFAULT_LOG_PATH
    return Path(override).expanduser()


def configure_logging(log_path: Path | None = None, level: int = logging.INFO) -> Path:
    if log_path is None:
        log_path = resolve_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)

    has_file = False
    has_stream = False
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and getattr(handler, "baseFilename", "") == os.path.abspath(log_path):
            has_file = True
        elif isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) in {sys.stdout, sys.stderr}:
            has_stream = True
    if not has_file:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root.addHandler(file_handler)
    if not has_stream:
        stream_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(level)
        root.addHandler(stream_handler)
    return log_path
