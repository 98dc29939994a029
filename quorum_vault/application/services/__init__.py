"""Application services for Quorum Vault."""

from quorum_vault.application.services.execution_guard_service import (
    ExecutionGuardService,
)
from quorum_vault.application.services.owner_registry_service import (
    OwnerRegistryService,
)
from quorum_vault.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from quorum_vault.application.services.quorum_vault import QuorumVault

__all__: list[str] = [
    "ExecutionGuardService",
    "OwnerRegistryService",
    "ProposalLedgerService",
    "QuorumVault",
]
