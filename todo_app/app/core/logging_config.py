"""
Logging setup for the todo server.

``setup_logging`` attaches a console handler, plus a file handler when
``LOG_FILE`` is set, to the root logger and does nothing on later
calls.  ``create_app`` may run many times in one test session.

Uvicorn writes one access line per request.  For a two-endpoint app
those lines drown out the storage and endpoint messages, so the
access logger is held at ``WARNING`` unless the app runs at ``DEBUG``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third party loggers that are too chatty at INFO.
NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    target: Optional[logging.Logger] = None,
) -> None:
    """Configure the todo app's logging.

    Parameters
    ----------
    level : str
        Level name for the app (``"DEBUG"``, ``"INFO"``, ...).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record.  Omitted or empty
        means console only.
    target : Optional[logging.Logger]
        Logger to configure.  Defaults to the root logger.
    """
    logger = target if target is not None else logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if numeric_level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
