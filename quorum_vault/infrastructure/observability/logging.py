"""Log output for the vault.

Every service logs through structlog with snake_case event names
(`proposal_submitted`, `execute_rejected`, `owner_removed`). This module
decides how those entries are rendered:

- production: one JSON object per line, for log shippers
- development: coloured console lines

The level comes from LOG_LEVEL (default INFO). Entries logged while a
correlation ID is set carry it, so the nested calls a destination makes
back into the vault during execution can be tied to the outer request.
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from quorum_vault.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Resolve LOG_LEVEL to a logging constant; unknown names mean INFO."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(environment: str = "production") -> None:
    """Install the vault's structlog pipeline.

    Call once per process, before the first vault is built (see
    bootstrap.vault.create_vault). Loggers are cached after first use, so
    later calls only affect loggers that have not logged yet.

    Args:
        environment: 'production' renders JSON; anything else renders
            console output.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "vault"
) -> structlog.BoundLogger:
    """Logger tagged with the emitting service and component.

    Args:
        service_name: Name of the emitting service, e.g. "bootstrap".
        component: Subsystem tag; every vault log line uses "vault".
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
