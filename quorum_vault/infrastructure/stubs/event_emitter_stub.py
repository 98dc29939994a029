"""Vault event emitter stub.

In-memory implementation of VaultEventEmitterProtocol that records every
delivered notification for inspection in tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from quorum_vault.application.ports.event_emitter import VaultEventEmitterProtocol

if TYPE_CHECKING:
    from quorum_vault.domain.events import VaultEvent

logger = logging.getLogger(__name__)

E = TypeVar("E")


class VaultEventEmitterStub(VaultEventEmitterProtocol):
    """Records emitted vault notifications in delivery order."""

    def __init__(self) -> None:
        self._events: list["VaultEvent"] = []

    async def emit(self, event: "VaultEvent") -> None:
        self._events.append(event)
        logger.debug("vault_event_emitted", extra={"event_type": event.event_type})

    @property
    def events(self) -> list["VaultEvent"]:
        return list(self._events)

    @property
    def emit_count(self) -> int:
        return len(self._events)

    def events_of_type(self, event_class: type[E]) -> list[E]:
        """Get delivered events of one class, in delivery order."""
        return [event for event in self._events if isinstance(event, event_class)]

    def event_types(self) -> list[str]:
        return [event.event_type for event in self._events]

    def clear(self) -> None:
        """Clear recorded events (for test cleanup)."""
        self._events.clear()
