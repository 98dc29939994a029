"""Vault event emitter port.

Observers outside the vault learn about committed state changes through
this port. It is a side channel: the vault writes to it and never reads
from it, and it is only called after an operation has committed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from quorum_vault.domain.events import VaultEvent


class VaultEventEmitterProtocol(Protocol):
    """Protocol for delivering vault notifications."""

    @abstractmethod
    async def emit(self, event: "VaultEvent") -> None:
        """Deliver one committed notification.

        Args:
            event: The notification to deliver.
        """
        ...
