"""
Logging setup for the Blog API.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger.  Every module logs through
``logging.getLogger(__name__)``, so storage, service and request
messages share one format.  Uvicorn's own loggers are left to
propagate to the root logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Extra destination for log records.  Its parent directory is
        created if missing.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured by uvicorn, pytest or an earlier create_app.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
