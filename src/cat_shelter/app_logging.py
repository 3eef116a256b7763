"""Logging setup for the shelter service."""

import logging

# Per-request INFO lines from the dependency clients.
_NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the ``cat_shelter`` logger once.

    Later calls only adjust the level. Transport libraries used by the
    dependency clients are capped at WARNING.
    """
    logger = logging.getLogger("cat_shelter")
    logger.setLevel(level.upper())
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
