"""
Logging configuration for the services.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Several applications may be built in one
process, e.g. when ``run.py all`` serves every service together or
when tests create an app per case, so the configuration is applied
only once per process.  Uvicorn's own loggers are aligned to the same
level so access and error lines follow ``LOG_LEVEL`` as well.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives a copy of every record.  Relative
        paths are resolved against the current working directory.

    Returns
    -------
    bool
        ``True`` if handlers were installed, ``False`` if the root
        logger was already configured and was left untouched.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
