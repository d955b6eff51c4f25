"""
Logger factory.

One named logger per app (APP_NAME). Every record carries a short ``uid``
fixed for the lifetime of the logger so lines from one process can be
grouped. Output goes to stdout inside docker, otherwise to a log file.
"""

from __future__ import annotations

import logging
import secrets
import sys
from pathlib import Path

STDOUT = "stdout"
LOG_FORMAT = "[%(asctime)s] %(name)s.%(levelname)s: %(message)s [uid=%(uid)s]"


class UidFilter(logging.Filter):
    """Adds ``uid`` to every LogRecord."""

    def __init__(self, length: int = 7):
        super().__init__()
        self.uid = secrets.token_hex((length + 1) // 2)[:length]

    def filter(self, record: logging.LogRecord) -> bool:
        record.uid = self.uid
        return True


def create_logger(name: str, path: str = STDOUT, level: str = "DEBUG") -> logging.Logger:
    """
    Build (or rebuild) the application logger.

    - ``path == "stdout"`` writes to sys.stdout, anything else is a file path
      whose parent directory is created on demand.
    - Calling it again with the same name replaces the previous handler and
      uid instead of stacking duplicates.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for old in [f for f in logger.filters if isinstance(f, UidFilter)]:
        logger.removeFilter(old)

    if path == STDOUT:
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
    else:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")

    uid_filter = UidFilter()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(uid_filter)
    logger.addHandler(handler)
    logger.addFilter(uid_filter)
    return logger
