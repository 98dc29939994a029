"""Bootstrap wiring for vault instances.

Builds a vault from configuration and its collaborators. There are no
module-level singletons: every call returns a fresh, independently owned
vault, and the caller keeps the reference.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from quorum_vault.application.ports.event_emitter import VaultEventEmitterProtocol
from quorum_vault.application.ports.ledger import LedgerPort
from quorum_vault.application.services.quorum_vault import QuorumVault
from quorum_vault.bootstrap.logging import configure_structlog
from quorum_vault.config.vault_config import VaultConfig
from quorum_vault.infrastructure.observability import get_logger_for_service
from quorum_vault.infrastructure.stubs.event_emitter_stub import VaultEventEmitterStub
from quorum_vault.infrastructure.stubs.ledger_stub import InMemoryLedgerStub


def load_vault_config(env_file: str | Path | None = None) -> VaultConfig:
    """Load configuration from an optional .env file and the environment.

    Values already present in the environment win over the file.

    Args:
        env_file: Path to a .env file; None searches the usual locations.

    Returns:
        The validated VaultConfig.
    """
    load_dotenv(dotenv_path=env_file, override=False)
    return VaultConfig.from_environment()


def create_vault(
    config: VaultConfig,
    ledger: LedgerPort | None = None,
    emitter: VaultEventEmitterProtocol | None = None,
    owners: Sequence[str] | None = None,
    required_confirmations: int | None = None,
    configure_logging: bool = False,
) -> QuorumVault:
    """Construct a vault and attach it to its ledger.

    Explicit owners/threshold override the configured ones. Without a
    ledger or emitter, in-memory stubs are used. When the ledger is the
    in-memory stub, the vault is registered as the contract handler for
    its own address so that transfers into it are announced.

    Args:
        config: Vault configuration.
        ledger: Ledger adapter.
        emitter: Notification adapter.
        owners: Initial owners.
        required_confirmations: Initial threshold.
        configure_logging: Configure structlog for config.environment first.

    Returns:
        The constructed vault.

    Raises:
        InvalidConfigurationError, InvalidThresholdError, InvalidOwnerError,
        DuplicateOwnerError: the initial owner set or threshold is invalid.
    """
    if configure_logging:
        configure_structlog(config.environment)

    log = get_logger_for_service("bootstrap", component="vault")
    ledger = ledger if ledger is not None else InMemoryLedgerStub()
    emitter = emitter if emitter is not None else VaultEventEmitterStub()

    vault = QuorumVault(
        address=config.vault_address,
        owners=list(owners) if owners is not None else list(config.owners),
        required_confirmations=(
            required_confirmations
            if required_confirmations is not None
            else config.required_confirmations
        ),
        ledger=ledger,
        emitter=emitter,
    )

    if isinstance(ledger, InMemoryLedgerStub):
        ledger.register_contract(vault.address, vault.handle_ledger_call)

    log.info(
        "vault_bootstrapped",
        vault_address=vault.address,
        environment=config.environment,
        owner_count=len(vault.get_owners()),
    )
    return vault
