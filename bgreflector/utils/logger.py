# -*- coding: utf-8 -*-
"""
Logging Setup
=============
File + console logging for the GUI launcher.
"""

import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = "bgreflector", log_file: Optional[str] = "bgreflector.log", level=logging.DEBUG):
    """Configure the application logger. ``log_file=None`` logs to the console only."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Drop existing handlers (avoid duplicates on re-setup)
    if logger.handlers:
        logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    return logger
