"""structlog configuration for the command-line entry point.

Diagnostics go to stderr through the standard logging module so they never
interleave with the menu on stdout. Default level is WARNING; --verbose
switches to DEBUG.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Route structlog through stdlib logging at the requested verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING

    # No-op when the root logger already has handlers (e.g. under pytest)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
