import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Route all log records to STDOUT through a single StreamHandler. Existing
    root handlers are removed so repeated calls do not duplicate output.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove default handlers to avoid duplication
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)


def set_aiohttp_logging_level(level: int = logging.WARNING) -> None:
    """Lowers logging level for aiohttp internals to avoid noise in STDOUT"""
    for name in ("aiohttp.client", "aiohttp.internal"):
        logging.getLogger(name).setLevel(level)
