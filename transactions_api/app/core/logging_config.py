"""
Logging configuration for the service.

``setup_logging`` installs one formatter on the root logger and makes
Uvicorn's loggers propagate to it, so server, request and application
messages all come out in the same format.  The ``urllib3`` logger used
by ``requests`` during seeding is capped at WARNING to keep connection
chatter out of the startup log.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``), case
        insensitive.  Unknown names fall back to INFO.
    logfile : Optional[str]
        Optional path of a file that receives the same records as the
        console.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app() may run several times in one process (tests).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    logging.getLogger("urllib3").setLevel(logging.WARNING)
