"""Console logging setup."""

import logging

LOG_FORMAT = "[basta-bridge] %(levelname)s %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Route package logs to the console handler only."""

    logger = logging.getLogger("basta_bridge")
    logger.setLevel(level.upper())
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    logger.propagate = False
    return logger
