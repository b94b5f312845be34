"""
Logging setup for the Mood Service.

``setup_logging`` attaches a console handler to the root logger. It only
does so once, so calling it again from tests or repeated app creation
leaves the existing handlers alone.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a timestamped console handler."""
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
