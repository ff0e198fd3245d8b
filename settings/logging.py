"""Logging configuration - loguru sinks, with stdlib loggers routed into them."""

import logging
import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

# Third-party stdlib loggers kept at WARNING
QUIET_LOGGERS = ("streamlit", "watchdog", "urllib3", "tornado")


class _InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Configure console and optional daily file output for the governance services."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "governance_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            enqueue=True,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if to_file:
        logger.info("Logging to {}", log_dir)
    return logger
