# src/task_keeper/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task_keeper.log"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console shows task_keeper logs at the handler level; everything else
    (third-party loggers, captured 'py.warnings') only at ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "task_keeper" or name.startswith("task_keeper."):
            return True
        return record.levelno >= logging.ERROR


def _resolve_level(level: int | str | None, default: int) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return default
    resolved = getattr(logging, str(level).strip().upper(), default)
    return resolved if isinstance(resolved, int) else default


def setup_logging(
    *,
    log_dir: str | Path = ".local/task_keeper",
    console_level: int | str | None = logging.INFO,
    file_level: int | str | None = logging.DEBUG,
) -> Path:
    """
    Configure the root logger once, early, from the host application.

    Levels may be given as ints or names ("debug", "WARNING"); unknown names
    fall back to INFO for the console and DEBUG for the file.
    Existing root handlers are replaced. Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(_resolve_level(console_level, logging.INFO))
    console.addFilter(_ConsoleNoiseFilter())

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(_resolve_level(file_level, logging.DEBUG))

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.DEBUG)
    for h in (console, to_file):
        h.setFormatter(fmt)
        root.addHandler(h)

    logging.captureWarnings(True)
    return log_file
