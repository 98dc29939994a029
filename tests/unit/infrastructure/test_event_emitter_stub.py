"""Unit tests for VaultEventEmitterStub."""

import pytest

from quorum_vault.domain.events import (
    DEPOSIT_RECEIVED_EVENT_TYPE,
    OWNER_ADDED_EVENT_TYPE,
    DepositReceivedEvent,
    OwnerAddedEvent,
)
from quorum_vault.infrastructure.stubs import VaultEventEmitterStub


class TestVaultEventEmitterStub:
    """Tests for the recording emitter."""

    @pytest.mark.asyncio
    async def test_records_in_order(self) -> None:
        """Events are kept in delivery order."""
        emitter = VaultEventEmitterStub()
        deposit = DepositReceivedEvent(sender="a", amount=1, balance=1)
        added = OwnerAddedEvent(owner="d", owner_count=4)
        await emitter.emit(deposit)
        await emitter.emit(added)
        assert emitter.events == [deposit, added]
        assert emitter.emit_count == 2
        assert emitter.event_types() == [DEPOSIT_RECEIVED_EVENT_TYPE, OWNER_ADDED_EVENT_TYPE]

    @pytest.mark.asyncio
    async def test_filter_and_clear(self) -> None:
        """events_of_type filters by class; clear() empties."""
        emitter = VaultEventEmitterStub()
        await emitter.emit(DepositReceivedEvent(sender="a", amount=1, balance=1))
        await emitter.emit(OwnerAddedEvent(owner="d", owner_count=4))
        assert len(emitter.events_of_type(OwnerAddedEvent)) == 1
        emitter.clear()
        assert emitter.events == []

    def test_events_returns_copy(self) -> None:
        """Callers cannot mutate the recorded list."""
        emitter = VaultEventEmitterStub()
        emitter.events.append("junk")  # type: ignore[arg-type]
        assert emitter.emit_count == 0
