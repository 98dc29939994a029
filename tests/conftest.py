"""
Pytest configuration and shared fixtures for Quorum Vault tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Vaults are built against the in-memory ledger and emitter stubs
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from quorum_vault.application.services.quorum_vault import QuorumVault
from quorum_vault.infrastructure.stubs import InMemoryLedgerStub, VaultEventEmitterStub
from tests.helpers import ALICE, BOB, CAROL, VAULT


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from quorum_vault import __version__

    return __version__


@pytest.fixture
def owners() -> list[str]:
    """Initial owner set used by most tests."""
    return [ALICE, BOB, CAROL]


@pytest.fixture
def ledger() -> InMemoryLedgerStub:
    """Fresh in-memory ledger."""
    return InMemoryLedgerStub()


@pytest.fixture
def emitter() -> VaultEventEmitterStub:
    """Fresh recording emitter."""
    return VaultEventEmitterStub()


@pytest.fixture
def vault(
    owners: list[str],
    ledger: InMemoryLedgerStub,
    emitter: VaultEventEmitterStub,
) -> QuorumVault:
    """2-of-3 vault registered as the ledger contract at VAULT."""
    vault = QuorumVault(
        address=VAULT,
        owners=owners,
        required_confirmations=2,
        ledger=ledger,
        emitter=emitter,
    )
    ledger.register_contract(VAULT, vault.handle_ledger_call)
    return vault


@pytest.fixture
def funded_vault(vault: QuorumVault, ledger: InMemoryLedgerStub) -> QuorumVault:
    """2-of-3 vault holding 100 units."""
    ledger.credit(VAULT, 100)
    return vault
