"""Extra log levels for parse tracing and decode detail."""

from __future__ import annotations

import logging

TRACE = 15
DETAIL = 18
logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(DETAIL, "DETAIL")

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def configure(verbose: bool = False) -> None:
    """Send pemv logging to stderr: TRACE when verbose, else DETAIL."""
    logging.basicConfig(level=TRACE if verbose else DETAIL, format=LOG_FORMAT)
