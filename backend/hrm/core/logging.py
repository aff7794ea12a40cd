"""Logging configuration.

One stdout handler with a fixed format. Request bodies and other payloads
are never logged, only record identifiers.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Access logs duplicate what the service already reports
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
