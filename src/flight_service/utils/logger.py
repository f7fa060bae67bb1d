"""
Logging utilities

Every log line carries the service name and environment. Request-scoped
fields (path, classification) are bound through structlog contextvars by the
classification middleware and merged into each event.
"""

import logging
from typing import Any, List, MutableMapping, Optional

import structlog

from .. import __version__
from ..config import config

SERVICE_NAME = "flight-service"


def add_service_context(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Stamp events with the service identity"""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", __version__)
    event_dict.setdefault("environment", config.server.environment)
    return event_dict


def build_processors(log_format: str) -> List[Any]:
    """Processor chain ending in a JSON or console renderer"""
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure stdlib logging and structlog; arguments override the LOGGING_ settings"""
    level_name = (level or config.logging.level).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    structlog.configure(
        processors=build_processors(log_format or config.logging.log_format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
