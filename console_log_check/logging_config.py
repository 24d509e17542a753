"""Opt-in diagnostic logging.

stdout is the stop hook's decision channel and stderr carries its
warnings, so diagnostics only ever go to a rotating file, and only when
CONSOLE_LOG_CHECK_LOG_FILE is set.
"""

import logging
import os
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_ENV = "CONSOLE_LOG_CHECK_LOG_FILE"
LOG_LEVEL_ENV = "CONSOLE_LOG_CHECK_LOG_LEVEL"

DEFAULT_MAX_BYTES = 1024 * 1024  # 1 MB
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(environ: Mapping[str, str] | None = None) -> logging.Logger | None:
    """Attach a file handler to the package logger if a log file is configured.

    Returns the configured logger, or None when logging stays disabled.
    """
    environ = os.environ if environ is None else environ
    log_file = environ.get(LOG_FILE_ENV)
    if not log_file:
        return None

    level_name = environ.get(LOG_LEVEL_ENV, "DEBUG").upper()
    level = getattr(logging, level_name, logging.DEBUG)
    if not isinstance(level, int):
        level = logging.DEBUG

    package_logger = logging.getLogger("console_log_check")
    package_logger.setLevel(level)
    package_logger.propagate = False

    # Reconfiguring replaces earlier file handlers instead of stacking them
    for handler in list(package_logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            package_logger.removeHandler(handler)
            handler.close()

    try:
        path = Path(os.path.expanduser(log_file))
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=DEFAULT_MAX_BYTES,
            backupCount=DEFAULT_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        # An unwritable log path must not turn into hook output
        return None

    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
