"""
Logging configuration for the directory service.

``setup_logging`` gives the root logger a console handler and, when a
log file is configured, a file handler.  It is called by ``create_app``
and by the ``migrate.py`` / ``seed.py`` scripts, so it recognises the
handlers it installed earlier and does nothing the second time.
Handlers added by others (uvicorn, the test runner) are left alone.

The HTTP client libraries log one line per row store request at INFO;
they are held at WARNING unless the level is DEBUG.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

HANDLER_PREFIX = "sauna_directory."
NOISY_LOGGERS = ("httpx", "httpcore")


def is_own_handler(handler: logging.Handler) -> bool:
    return (handler.get_name() or "").startswith(HANDLER_PREFIX)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.
    quiet : Iterable[str]
        Logger names raised to WARNING unless ``level`` is DEBUG.
    """
    root = logging.getLogger()
    if any(is_own_handler(handler) for handler in root.handlers):
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_PREFIX + "console")
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if numeric_level > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)
