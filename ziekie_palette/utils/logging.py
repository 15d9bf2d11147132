"""
Ziekie Palette Logging
loguru helpers for the extraction engine.

The package never removes or replaces sinks. Host apps that already
configure loguru see palette records through their own sinks; others can
call ``configure_logging`` once at startup.
"""
import sys
from typing import Any, Optional

from loguru import logger

from ziekie_palette.config import config

PACKAGE_NAME = "ziekie_palette"

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message} | {extra}"


def configure_logging(level: Optional[str] = None, sink: Any = sys.stdout,
                      serialize: bool = False) -> int:
    """
    Add a sink that receives palette engine records only.

    Args:
        level: Minimum level (default ``config.LOG_LEVEL``)
        sink: Any loguru sink (stream, path, callable)
        serialize: Emit JSON lines instead of formatted text

    Returns:
        loguru handler id, for ``logger.remove``
    """
    return logger.add(
        sink,
        format=LOG_FORMAT,
        level=level or config.LOG_LEVEL,
        filter=PACKAGE_NAME,
        serialize=serialize,
    )


def get_logger(**extra: Any):
    """Logger with ``extra`` fields (e.g. an extraction id) bound to every record."""
    return logger.bind(**extra)
