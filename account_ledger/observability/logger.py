"""
Structured Logger

DESIGN DECISION: Every balance-changing decision is logged.
This provides:
1. Traceability of credits, debits and rejections
2. Debugging capability for malformed input
3. A record of ignored writes and ignored operations

The logger:
- Writes to stderr so it never mixes with the menu's message output
- Goes through the stdlib logging module so levels are filtered in one place
- Renders JSON for machines or key=value lines for humans
"""

import logging
import sys
from typing import Optional

import structlog


_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]

_handler: Optional[logging.Handler] = None


def _renderer(fmt: str):
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def _configure_structlog(fmt: str) -> None:
    # No logger caching: module-level loggers must pick up every reconfiguration.
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(fmt)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """
    Configure structlog on top of the stdlib root logger.
    
    Safe to call more than once: the previous handler is replaced
    rather than stacked, and loggers already in use switch to the
    new renderer.
    """
    global _handler
    
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(level.upper())
    
    _configure_structlog(fmt)


def get_logger(name: Optional[str] = None):
    """Return a structlog logger bound to the stdlib logger `name`."""
    return structlog.get_logger(name)


# Default configuration so loggers work before the app configures them.
_configure_structlog("console")
