"""
Logging setup for the API process.

``setup_logging`` attaches a single console handler to the root logger.
It is a no-op when handlers already exist, so calling it from tests or
from repeated app construction does not duplicate output.
"""

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)
