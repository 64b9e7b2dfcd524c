"""
Logging Configuration
Sets up the global logger for the calibration engine.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'usablearea' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG to trace every correction)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("usablearea")
    logger.setLevel(level)

    # Avoid duplicate handlers when a host sets up logging more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Usable-area calibration logging initialized at {logging.getLevelName(level)}"
                + (f", writing to {log_file}." if log_file else "."))
