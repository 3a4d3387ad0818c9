"""
Logging configuration for the orders service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  When SQL tracing is requested the
``sqlalchemy.engine`` logger is raised to ``INFO`` so every statement
sent to the order store shows up next to the request logs.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, trace_sql: bool = False) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to mirror log records into.  Resolved against the
        current working directory.
    trace_sql : bool
        Log SQL statements issued through SQLAlchemy.
    """
    root = logging.getLogger()
    if root.handlers:
        # Test runners and repeated create_app() calls land here.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if trace_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
