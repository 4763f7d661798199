"""
Structured logging for aiconnectify.

Every module logs through get_logger(__name__) with key=value context
(``connector=``, ``endpoint=``, ``error_type=``). The library never configures
output on import; an application calls configure_logging() once, or wires
structlog itself.
"""

import logging
import sys
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from aiconnectify.core.config import settings

LIBRARY_LOGGER = "aiconnectify"
SECRET_KEYS = frozenset({"api_key", "authorization", "x-api-key", "token"})
MASK = "***"


def mask_secrets(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Replace credential values in the event with a fixed mask."""
    for key in list(event_dict):
        if key.lower() in SECRET_KEYS and event_dict[key]:
            event_dict[key] = MASK
    return event_dict


logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog for the embedding application.

    Args:
        level: Log level name; defaults to settings.LOG_LEVEL
        json_output: Render JSON lines instead of colored console output.
            Defaults to JSON outside development environments.
    """
    log_level = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.APP_ENV.lower() not in ("development", "dev", "local")

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level, logging.INFO),
    )

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        mask_secrets,
    ]

    if json_output:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.extend(
            [
                structlog.dev.set_exc_info,
                structlog.dev.ConsoleRenderer(colors=True),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a structlog logger backed by the stdlib logger of the same name.

    Output is governed by the host's logging configuration. The
    ``aiconnectify`` logger carries a NullHandler, so nothing is printed until
    the host adds a handler.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def add_connector_context(connector_name: str) -> Dict[str, Any]:
    return {"connector": connector_name}
