import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the ``ers`` logger tree.

    Safe to call more than once (tests build several apps per session).
    """
    log = logging.getLogger("ers")
    log.setLevel(level.upper())

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    log.propagate = False
    return log
