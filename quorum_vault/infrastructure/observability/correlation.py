"""Correlation IDs for vault log entries.

A caller sets an ID once per request; it lives in a contextvar, so it is
visible to every log entry made by the same task, including reentrant
calls from a destination during execution. The processor only adds the
field when an ID is set.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """New random request ID (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Correlation ID of the current task, or "" outside any request."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Tag the current task (and tasks it spawns) with a request ID.

    Pass "" to stop tagging.
    """
    _correlation_id.set(correlation_id)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id when one is set."""
    correlation_id = _correlation_id.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
