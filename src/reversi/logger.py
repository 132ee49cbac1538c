"""
Logging utilities for Reversi.
"""
import os
import logging
from datetime import datetime

from .config import Config

LOGGER_NAME = 'reversi'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(config: Config) -> logging.Logger:
    """
    Set up the package logger.

    Replaces any handlers left over from an earlier call, so calling this
    twice does not duplicate output.

    Args:
        config: Configuration object

    Returns:
        The configured 'reversi' logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.logging.log_level.upper())

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    # Set up console logging
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    # Set up file logging
    if config.logging.log_to_file:
        os.makedirs(config.logging.log_dir, exist_ok=True)
        run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        log_file = os.path.join(config.logging.log_dir, f"{run_name}.log")
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
