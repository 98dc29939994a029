"""Application ports (hexagonal architecture) for Quorum Vault."""

from quorum_vault.application.ports.event_emitter import VaultEventEmitterProtocol
from quorum_vault.application.ports.ledger import InvocationResult, LedgerPort

__all__: list[str] = [
    "InvocationResult",
    "LedgerPort",
    "VaultEventEmitterProtocol",
]
