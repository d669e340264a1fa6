"""Logging configuration for git-cleanup-merged"""
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

PACKAGE_PREFIXES = ('git_cleanup_merged.', 'services.')

CONSOLE_FORMAT = '[%(name)s] %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name when writing to a terminal.

    The record itself is left untouched, so other handlers (the log file)
    never see escape codes.
    """

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, stream: Optional[TextIO] = None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.stream = stream if stream is not None else sys.stderr

    def use_color(self) -> bool:
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None or not self.use_color():
            return super().format(record)

        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def get_log_file() -> Path:
    """Location of the debug log file."""
    return Path.home() / '.git-cleanup-merged' / 'git-cleanup-merged.log'


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def _file_handler() -> logging.Handler:
    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    # Each run starts a fresh log
    handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level: int, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if debug:
        formatter = ColoredFormatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT, stream=sys.stderr)
    else:
        formatter = ColoredFormatter(fmt=CONSOLE_FORMAT, stream=sys.stderr)
    handler.setFormatter(formatter)
    return handler


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Warnings and errors go to stderr by default. ``verbose`` adds INFO;
    ``debug`` adds DEBUG, timestamps, and a full log file at get_log_file().
    Calling it again replaces the previous configuration.
    """
    level = _level_for(verbose, debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        root_logger.addHandler(_file_handler())
    root_logger.addHandler(_console_handler(level, debug))


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, named without the package prefix."""
    for prefix in PACKAGE_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
    return logging.getLogger(name)
