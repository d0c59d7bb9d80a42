"""
structlog setup driven by Settings.log_level / Settings.log_format.

Library modules log through stdlib loggers under the ``productcode`` name.
The package installs a ``NullHandler`` on that logger, so nothing is written
until an entry point calls :func:`configure_logging`.
"""

import logging
import sys

import structlog

from productcode.config import Settings, get_settings

HANDLER_NAME = "productcode"


def get_logger(name: str):
    """Return a structlog logger that emits through the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog for the process.

    Log lines go to stderr so command output on stdout stays machine-readable.
    Calling this again replaces the handler installed by the previous call.
    """
    settings = settings or get_settings()
    level = _resolve_level(settings.log_level)

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
