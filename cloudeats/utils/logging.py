# cloudeats/utils/logging.py
import logging
import sys

from cloudeats.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_root = logging.getLogger("cloudeats")

if not _root.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    _root.addHandler(handler)
    _root.setLevel(LOG_LEVEL.upper())
    _root.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
