"""
Logging setup for GDA.

Every module logs under the ``gda`` namespace (``gda.auction``,
``gda.ledger``, ``gda.cli``). Console output is colored and goes to
stderr so command output on stdout stays clean; a plain-text log file
is written only when asked for.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import colorlog

ROOT_LOGGER = "gda"
LOG_FILE = "gda.log"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(log_color)s%(asctime)s [%(name)s] %(levelname)-8s%(reset)s %(message)s"
FILE_FORMAT = "%(asctime)s [%(name)s] %(levelname)-8s %(message)s"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def _console_handler(level: int) -> logging.Handler:
    handler = colorlog.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        colorlog.ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT, log_colors=LEVEL_COLORS)
    )
    return handler


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(exist_ok=True, parents=True)
    handler = logging.FileHandler(log_dir / LOG_FILE)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


class GDALogger:
    """Owns the handlers on the ``gda`` logger."""

    _initialized = False
    _log_dir: Optional[Path] = None

    @classmethod
    def setup(
        cls,
        level: int = logging.INFO,
        log_dir: Optional[str] = None,
        log_to_file: bool = False,
        force: bool = False,
    ):
        """
        Configure the ``gda`` logger.

        Importing the library configures it once at INFO with console
        output only. The CLI calls again with ``force`` once the level
        from --debug or the config file is known.

        Args:
            level: Logging level for the logger and its handlers
            log_dir: Directory for gda.log. Implies log_to_file.
            log_to_file: Also write gda.log (under ./logs if no log_dir)
            force: Replace the handlers of an earlier setup
        """
        if cls._initialized and not force:
            return

        if log_dir or log_to_file:
            cls._log_dir = Path(log_dir or "logs")
        else:
            cls._log_dir = None

        root = logging.getLogger(ROOT_LOGGER)
        root.setLevel(level)
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

        root.addHandler(_console_handler(level))
        if cls._log_dir is not None:
            root.addHandler(_file_handler(cls._log_dir, level))

        cls._initialized = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Logger ``gda.<name>``, configuring defaults on first use."""
        if not cls._initialized:
            cls.setup()
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def get_logger(name: str) -> logging.Logger:
    return GDALogger.get_logger(name)


def setup_logging(level: int = logging.INFO, log_dir: Optional[str] = None):
    """Reconfigure logging, replacing any earlier setup."""
    GDALogger.setup(level=level, log_dir=log_dir, force=True)
