"""Process-wide log setup for the shop API.

Called once from the lifespan. Modules only ever ask for
``logging.getLogger(__name__)``; documents and ids may be logged,
request bodies never are.
"""

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# Loggers that repeat what the app already reports
QUIET_LOGGERS = ("uvicorn.access",)


def configure_logging(level: str = "INFO") -> None:
    """Send every record at ``level`` or above to stdout.

    Replaces handlers left by an earlier call, so reloading the app does
    not duplicate lines.
    """
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
