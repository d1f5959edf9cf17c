"""structlog output for the ``tagval`` logger.

tagval modules log through stdlib ``logging.getLogger(__name__)``.
:func:`configure_logging` attaches one structlog-formatted handler to the
``tagval`` logger and nothing else: the root logger, its handlers and its
level belong to the host application and are left untouched.

Two output modes:
- Human (default): console-formatted output to stderr
- JSON (``log_json=True``): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from tagval.config.settings import ValidatorSettings

LOGGER_NAME = "tagval"

# Set on handlers installed here so a later call can find and replace them.
_HANDLER_MARKER = "_tagval_handler"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def build_handler(*, log_json: bool = False) -> logging.Handler:
    """Return a stderr handler rendering records through structlog."""
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Logger:
    """Route ``tagval`` log records to a structlog-formatted stderr handler.

    Repeated calls replace the handler installed by the previous call.
    Records stop propagating to the root logger so they are not printed
    twice when the host has its own root handler.

    Args:
        verbose: Emit DEBUG records. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The configured ``tagval`` logger.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(build_handler(log_json=log_json))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger


def configure_from_settings(settings: ValidatorSettings) -> logging.Logger:
    """Apply the logging flags carried by *settings*."""
    return configure_logging(verbose=settings.verbose, log_json=settings.log_json)
