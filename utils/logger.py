# utils/logger.py
import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

DEFAULT_LOG_DIR = "data/logs"


def setup_logger(level=logging.INFO, log_dir=None, file_logging=True):
    """
    Configure the global logger for the checkout.

    Features:
    - Daily rotating log files (one file per day), kept for a week
    - Console + file output
    - Unified log format with timestamp and level
    - Log directory from SUPERMARKET_LOG_DIR unless given explicitly

    Child loggers such as "supermarket.checkout" propagate here.
    """

    logger = logging.getLogger("supermarket")
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if file_logging:
        log_dir = Path(log_dir or os.getenv("SUPERMARKET_LOG_DIR", DEFAULT_LOG_DIR))
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            filename=log_dir / "checkout.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console goes to stderr so stdout carries only the total
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logger initialized (file logging %s)", "on" if file_logging else "off")
    return logger
