import logging
import sys

FORMAT = "%(levelname)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Send the package's log records to stderr; stdout carries only the frame."""
    logger = logging.getLogger("ansipix")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)
