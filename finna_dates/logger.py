"""
Unified Logging Module
======================

Shared logging setup for the finna_dates package.

Module loggers hang under the "finna_dates" root logger, which writes to the
console. Record warnings collected by a WarningSink are also logged, at
DEBUG level, on their own "finna_dates.warnings" channel so they can be
silenced or raised separately from parser diagnostics.

The command line tool prints its results on stdout, so it moves the console
handler to stderr with configure_cli_logging().

Usage:
    from finna_dates.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Parsing %s", raw)
    logger.warning("No driver for format %s", record_format)
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "finna_dates"
WARNINGS_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.warnings"

# Default log format with timestamp, level, and module name
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = logging.INFO
CONSOLE_STREAMS = ("stdout", "stderr")

_console_handler: Optional["ConsoleHandler"] = None


class ConsoleHandler(logging.StreamHandler):
    """
    StreamHandler bound to sys.stdout or sys.stderr by name.

    The stream is looked up on every write, so a replaced sys.stdout or
    sys.stderr (output capture, redirection) receives the log lines.
    """

    def __init__(self, stream_name: str = "stdout"):
        self.stream_name = stream_name
        super().__init__()

    @property
    def stream(self):
        return getattr(sys, self.stream_name)

    @stream.setter
    def stream(self, value):
        # Assigned by StreamHandler.__init__; the named stream always wins.
        pass


def _configure_root_logger() -> None:
    """
    Configure the package root logger with a console handler.

    Runs once; the module-level handler guards against repeated setup.
    """
    global _console_handler
    if _console_handler is not None:
        return

    console_handler = ConsoleHandler("stdout")
    console_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(DEFAULT_LEVEL)
    root_logger.addHandler(console_handler)
    root_logger.propagate = False

    _console_handler = console_handler


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: logger name, usually the calling module's __name__
        level: optional level; the package default (INFO) applies otherwise

    Returns:
        the configured logging.Logger
    """
    _configure_root_logger()

    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level)

    return logger


def get_warnings_logger() -> logging.Logger:
    """The channel that mirrors WarningSink entries."""
    return get_logger(WARNINGS_LOGGER_NAME)


def parse_level(level: Union[int, str]) -> int:
    """
    Turn a level name such as "debug" into its number.

    Raises:
        ValueError: for an unknown level name
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level}")
    return value


def set_level(level: Union[int, str], logger_name: Optional[str] = None) -> None:
    """
    Set the level of a named logger or of the package root logger.

    Args:
        level: logging level, numeric or a level name such as "DEBUG"
        logger_name: optional logger name; None targets the package root

    Example:
        set_level(logging.DEBUG)  # debug for every finna_dates module
        set_level("DEBUG", "finna_dates.dates.lido")
    """
    _configure_root_logger()
    logger = logging.getLogger(logger_name or ROOT_LOGGER_NAME)
    logger.setLevel(parse_level(level))


def set_console_stream(stream_name: str) -> None:
    """Send console log lines to "stdout" or "stderr"."""
    if stream_name not in CONSOLE_STREAMS:
        raise ValueError(f"unknown console stream: {stream_name}")
    _configure_root_logger()
    _console_handler.stream_name = stream_name


def configure_cli_logging(level: Union[int, str], record_warnings: bool = False) -> None:
    """
    Logging policy of the command line tool.

    Log lines go to stderr, next to the [warn] and [error] lines, and stdout
    carries only results. The warnings channel is quiet unless
    record_warnings is set, since the tool prints the collected warnings
    itself; with it, every warning is logged as it is recorded.

    Raises:
        ValueError: for an unknown level name
    """
    set_console_stream("stderr")
    set_level(level)
    set_level(logging.DEBUG if record_warnings else logging.WARNING, WARNINGS_LOGGER_NAME)
