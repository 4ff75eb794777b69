"""
lottery_generator/utils/logger.py
Package-wide logging: every area logs under the "lottery" parent, which owns
a Rich console handler and one rotating lottery.log file.
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

ROOT_LOGGER = "lottery"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).lower() not in ("0", "false", "no")


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if root.handlers:
        return root

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level, logging.INFO))

    # Numbers are printed by the report, keep log markup off
    console = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
    root.addHandler(console)

    if _env_flag("LOG_TO_FILE"):
        log_dir = os.getenv("LOG_DIR", "logs")
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, f"{ROOT_LOGGER}.log"),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
    return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Logger for one area, e.g. get_logger("selector") -> "lottery.selector"."""
    if name in _loggers:
        return _loggers[name]

    root = _configure_root()
    logger = root if name == ROOT_LOGGER else root.getChild(name)
    _loggers[name] = logger
    return logger
