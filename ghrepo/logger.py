"""Logging setup shared by the CLI and the API operations.

Records go to stderr so stdout only carries command output.
"""
import logging

logformat = "[%(asctime)s] [%(levelname)s] %(message)s"

logger: logging.Logger = logging.getLogger("ghrepo")


def init_logger(logger_name: str = "ghrepo", verbose: bool = False) -> logging.Logger:
    """Configure the root handler and return the package logger.

    Args:
        logger_name: Name of the logger to configure.
        verbose: Log at DEBUG instead of WARNING.

    Returns:
        The configured logger, also returned by `get_logger` from then on.
    """
    global logger
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=logformat)
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    return logger


def get_logger() -> logging.Logger:
    return logger
