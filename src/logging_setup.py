"""Logging configuration for the todo app.

The menu owns stdout, so log records go to stderr (warnings and up only) and
to a debug log file next to the todo file.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

LOG_DIR = Path(__file__).parent.parent / 'data'
LOG_FILENAME = 'todo.log'


def setup_logging(
    *,
    log_dir: str | Path = LOG_DIR,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: storage problems surface to the operator as warnings
    - File handler: full logs for debugging

    Call this ONCE, before the first todo file access. A log directory that
    cannot be created or written only disables the file handler.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(ch)

    log_dir = Path(log_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / LOG_FILENAME), encoding="utf-8")
    except OSError as exc:
        # console logging still works; the todo file gets its own error handling
        logger.warning("Log file disabled, cannot write to %s: %s", log_dir, exc)
    else:
        fh.setLevel(file_level)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    logging.captureWarnings(True)
