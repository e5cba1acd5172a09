# backend/utils/logging_config.py
"""Process-wide logging setup.

Every module logs through ``logging.getLogger(__name__)``. The backend
modules are top-level (``routes.products``, ``repositories...``), so the
handlers are attached to each of those logger roots instead of the root
logger, which leaves uvicorn's own loggers untouched.

Handlers added here carry a name, so repeated calls recognise their own
handlers and leave foreign ones (pytest's capture handler, a host
application's) alone.
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGERS = ("main", "routes", "repositories", "utils")

CONSOLE_HANDLER_NAME = "catalog.console"
FILE_HANDLER_NAME = "catalog.file"


def _find_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def _file_handler(log_file: Path, formatter: logging.Formatter) -> logging.FileHandler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.set_name(FILE_HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> List[logging.Logger]:
    """Attach console (and optional file) handlers to the application loggers.

    Safe to call repeatedly: each logger gets at most one console and one
    file handler. A call with a different ``log_file`` moves the file
    handler to the new path.
    """
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
    configured = []

    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        logger.propagate = False

        if _find_handler(logger, CONSOLE_HANDLER_NAME) is None:
            console = logging.StreamHandler(sys.stderr)
            console.set_name(CONSOLE_HANDLER_NAME)
            console.setFormatter(formatter)
            logger.addHandler(console)

        current = _find_handler(logger, FILE_HANDLER_NAME)
        if log_file is not None:
            target = os.path.abspath(os.fspath(log_file))
            if current is not None and current.baseFilename != target:
                logger.removeHandler(current)
                current.close()
                current = None
            if current is None:
                logger.addHandler(_file_handler(log_file, formatter))

        configured.append(logger)

    return configured
