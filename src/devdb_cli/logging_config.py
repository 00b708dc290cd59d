"""Structured logging setup for the CLI.

Log events go to stderr so they never mix with command output on stdout.
The default level is WARNING; ``devdb --verbose`` lowers it to DEBUG, which
shows config resolution and one request/response pair per command.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Look sys.stderr up per logger so redirected streams are honoured.
    return structlog.PrintLogger(sys.stderr)


def setup_logging(verbose: bool = False) -> None:
    """Configure structlog for one CLI invocation."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
