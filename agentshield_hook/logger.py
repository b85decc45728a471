"""
Package logger for the AgentShield hook.

All modules log through the single ``logger`` exported here, using bracketed
component prefixes such as ``[agentshield]`` or ``[hooks]``.
"""

import logging
import sys


LOGGER_NAME = "agentshield"


def _create_logger() -> logging.Logger:
    """Create the package logger, writing plain messages to stderr."""
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
        log.setLevel(logging.INFO)
        log.propagate = False
    return log


logger = _create_logger()
