"""
Logging for the ``seam_carving`` namespace.

Printed maps own stdout, so log records go to stderr and, when asked, to a
log file as well.
"""
import logging
import sys
from typing import List, Optional

LOGGER_NAME = "seam_carving"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package logger to stderr and an optional file.

    Repeated calls replace the previous handlers, closing any open log file.

    Args:
        level: Logging level for the logger and every handler
        log_file: Path of a log file, truncated on open

    Returns:
        The configured ``seam_carving`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    for handler in _build_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to stderr%s", f" and {log_file}" if log_file else "")
    return logger
