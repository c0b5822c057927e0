"""Defines the :class:`.Logger` class and the package level log helpers.

Library code logs through :func:`.subdiurnalLogError` and friends, which write to the
``subdiurnal`` logger without configuring it. Handlers are only attached when an application
(e.g. the command line tool) builds a :class:`.Logger`, following the settings in the
``[logging]`` section of :class:`.BehavioralConfig`.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "subdiurnal"
"""``str``: name of the top-level package logger."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by the stdout and file handlers."""


def logFileName(name: str, timestamp: datetime | None = None) -> str:
    """Build a log file name for the logger `name`, stamped with `timestamp`.

    Args:
        name (``str``): logger name, used as the file prefix.
        timestamp (``datetime``, optional): time of the stamp. Defaults to now.

    Returns:
        ``str``: e.g. ``"subdiurnal_2007-08-23T12-30-00123456.log"``, safe on every platform.
    """
    if timestamp is None:
        timestamp = datetime.now()
    stamp = timestamp.isoformat().replace(":", "-").replace(".", "")
    return f"{name}_{stamp}.log"


class Logger:
    """Wrapper around a standard :class:`logging.Logger` with handlers built from the config.

    Records go to stdout, or to a rotating log file in a directory, depending on the
    ``OutputLocation`` option.
    """

    def __init__(
        self,
        name=PACKAGE_LOGGER_NAME,
        level=None,
        path=None,
        allow_multiple_handlers=None,
    ):
        """Attach a handler to the named logger, unless one is already attached.

        Args:
            name (``str``, optional): logger name. Defaults to the package logger, so the
                package level helpers share its handler.
            level (``int``, optional): minimum record level. Defaults to ``[logging] Level``.
            path (``str``, optional): ``"stdout"`` or a directory for log files. Defaults to
                ``[logging] OutputLocation``.
            allow_multiple_handlers (``bool``, optional): attach another handler even if the
                logger already has one. Defaults to ``[logging] AllowMultipleHandlers``.
        """
        log_config = BehavioralConfig.getConfig().logging
        if not level:
            level = log_config.Level
        if not path:
            path = log_config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = log_config.AllowMultipleHandlers

        self.filename = None
        self.logger = logging.getLogger(name)
        if self.logger.handlers and not allow_multiple_handlers:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)
        else:
            if not exists(path):
                makedirs(path)
            self.filename = join(path, logFileName(name))
            handler = RotatingFileHandler(
                self.filename,
                maxBytes=log_config.MaxFileSize,
                backupCount=log_config.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Delegate everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _subdiurnalLog(message: str, level: int):
    """Log `message` at `level` on the package logger, attributed to the helper's caller.

    Args:
        message (``str``): message to record in the log.
        level (``int``): level of the record, one of the `logging` level constants.
    """
    # Skip this function and the public helper so %(module)s names the caller
    logging.getLogger(PACKAGE_LOGGER_NAME).log(level, message, stacklevel=3)


def subdiurnalLogError(message: str):
    """Log an ERROR message on the package logger."""
    _subdiurnalLog(message, logging.ERROR)


def subdiurnalLogWarning(message: str):
    """Log a WARNING message on the package logger."""
    _subdiurnalLog(message, logging.WARNING)


def subdiurnalLogInfo(message: str):
    """Log an INFO message on the package logger."""
    _subdiurnalLog(message, logging.INFO)


def subdiurnalLogDebug(message: str):
    """Log a DEBUG message on the package logger."""
    _subdiurnalLog(message, logging.DEBUG)
