"""Console logging setup for the swatchbook CLI."""

from __future__ import annotations

import logging

__all__ = ['configure_logging']

_MANAGED_HANDLER_FLAG = '_swatchbook_managed_handler'


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Install a single stderr handler on the swatchbook logger.

    Calling it again replaces the handler rather than stacking another one.
    """
    logger = logging.getLogger('swatchbook')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, _MANAGED_HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        )
    )
    setattr(handler, _MANAGED_HANDLER_FLAG, True)
    logger.addHandler(handler)
    logging.captureWarnings(True)
    return logger
