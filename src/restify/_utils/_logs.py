import logging
import sys
from typing import Optional

LOGGER_NAME = "restify"

_handler: Optional[logging.Handler] = None


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a stream handler to the ``restify`` logger.

    Calling it again only updates the level.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
