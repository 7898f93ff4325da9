"""Diagnostic logging for the rosetta CLI.

User-facing output never goes through logging; these logs are for
troubleshooting the background fetch and the on-disk state.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_VERBOSITY_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


def console_level_for(verbosity: int) -> int:
    """Map the 0-3 verbosity scale onto a logging level (clamped)."""
    return _VERBOSITY_LEVELS[max(0, min(verbosity, 3))]


class _ConsoleNoiseFilter(logging.Filter):
    """Keep rosetta logs, drop third-party chatter below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "rosetta" or record.name.startswith("rosetta."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_file: str | Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler on stderr, filtered for interactive use
    - Optional file handler with everything at ``file_level``

    Call this once, before the first log record is emitted.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(threadName)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
