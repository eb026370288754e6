"""
Structured logging setup.

Call configure_logging() once from an entry point (scripts, the host
application). Library modules only call structlog.get_logger(__name__).
"""

import logging
import sys
from typing import Optional
import structlog

from config.settings import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog on top of the stdlib logging module.

    JSON output in production, console output otherwise.

    Args:
        level: Override for settings.log_level
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level or settings.log_level),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if settings.is_production
                else structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
