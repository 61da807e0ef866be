"""
Logging configuration.

The library itself only emits DEBUG records under the 'pymatrix'
namespace. Applications that want to see them call configure_logging().
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route 'pymatrix' records to stdout, and to log_file when given.

    Handlers from a previous call are closed and replaced.

    Args:
        level: Logging level (e.g. logging.DEBUG)
        log_file: Optional path to also write logs to.

    Returns:
        The 'pymatrix' logger.
    """
    logger = logging.getLogger("pymatrix")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
