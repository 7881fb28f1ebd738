"""Console and file logging for Monolith.

Every module asks for its logger through :func:`get_logger`, which prints via
Rich. A log file is opt-in via ``--log-file`` (``--verbose`` only raises the
level to DEBUG) and is attached once to the ``monolith`` parent logger so all
child loggers share it.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "monolith"
DEFAULT_LOG_FILE = Path.home() / ".monolith" / "monolith.log"
FALLBACK_LOG_FILE = Path("/tmp/monolith.log")

FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

console = Console()

_file_handler: Optional[logging.FileHandler] = None


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def _writable_log_path(requested: Optional[str]) -> Path:
    path = Path(requested).expanduser() if requested else DEFAULT_LOG_FILE
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        path = FALLBACK_LOG_FILE
    return path


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Attach a file handler to the ``monolith`` logger.

    Args:
        log_file: Target file, ``~/.monolith/monolith.log`` when omitted.
            Falls back to ``/tmp/monolith.log`` if the directory can't be created.
        verbose: Record DEBUG lines as well

    Returns:
        Path of the log file in use. Repeat calls return the first path.
    """
    global _file_handler

    if _file_handler is not None:
        return Path(_file_handler.baseFilename)

    path = _writable_log_path(log_file)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(_level(verbose))
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))

    root = logging.getLogger(ROOT_LOGGER)
    root.addHandler(handler)
    root.setLevel(_level(verbose))
    _file_handler = handler

    root.debug(f"File logging enabled: {path}")
    return path


def set_verbose(verbose: bool = True) -> None:
    """Move every ``monolith.*`` logger to DEBUG (or back to INFO)."""
    level = _level(verbose)
    logging.getLogger(ROOT_LOGGER).setLevel(level)
    for name, candidate in logging.Logger.manager.loggerDict.items():
        if name.startswith(ROOT_LOGGER + ".") and isinstance(candidate, logging.Logger):
            candidate.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return *name*'s logger with a Rich console handler attached once."""
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        rich_handler = RichHandler(console=console, show_path=False)
        rich_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(rich_handler)
        logger.setLevel(logging.INFO)

    return logger
