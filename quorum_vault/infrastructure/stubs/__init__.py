"""In-memory stub adapters for development and testing."""

from quorum_vault.infrastructure.stubs.event_emitter_stub import VaultEventEmitterStub
from quorum_vault.infrastructure.stubs.ledger_stub import (
    ContractHandler,
    InMemoryLedgerStub,
)

__all__: list[str] = [
    "ContractHandler",
    "InMemoryLedgerStub",
    "VaultEventEmitterStub",
]
