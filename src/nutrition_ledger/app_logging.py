"""Logging configuration for the ledger package."""

import logging

LEDGER_LOGGER = "nutrition_ledger"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Apply the level to the ledger logger and attach its stream handler once.

    Level names are case-insensitive, so ``"debug"`` from an env file works.
    """
    logger = logging.getLogger(LEDGER_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
