"""
kitties_core.logger
-------------------
JSON-line logging shared by the registry and storage providers.

Every module takes a named logger ("Kitties.Registry", "Kitties.Storage.SQLite")
from get_logger(). Level and optional file sink come from the arguments or,
when omitted, from KITTIES_LOG_LEVEL / KITTIES_LOG_FILE.
"""

import logging, json, sys, time, os


def get_logger(name="kitties", level=None, to_file=None):
    if level is None:
        level = os.getenv("KITTIES_LOG_LEVEL", "INFO").upper()
    if to_file is None:
        to_file = os.getenv("KITTIES_LOG_FILE") or None

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps

        handlers = [logging.StreamHandler(sys.stdout)]
        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            handlers.append(logging.FileHandler(to_file))

        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger
