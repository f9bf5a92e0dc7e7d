"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module only
installs a single stream handler on the root logger at startup.
"""

import logging
import sys

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    """Install the stream handler once and set the root level from settings."""
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    if any(getattr(h, "_habitquest", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._habitquest = True
    root.addHandler(handler)
