import logging
import sys
import time


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Send ``name_parser`` log records to stderr.

    Idempotent: calling this again only updates the level and formatter of the
    existing stderr handler.
    """
    logger = logging.getLogger("name_parser")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    formatter.converter = time.gmtime

    handler = None
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr:
            handler = h
            break
    if handler is None:
        handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(handler)

    handler.setLevel(logger.level)
    handler.setFormatter(formatter)
    return logger
