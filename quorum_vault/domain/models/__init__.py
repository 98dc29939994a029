"""Domain models for Quorum Vault."""

from quorum_vault.domain.models.governance_call import GovernanceCall, GovernanceMethod
from quorum_vault.domain.models.owner_registry import OwnerRegistry
from quorum_vault.domain.models.proposal import (
    Proposal,
    ProposalView,
    compute_content_hash,
)
from quorum_vault.domain.models.vault_state import VaultState

__all__: list[str] = [
    "GovernanceCall",
    "GovernanceMethod",
    "OwnerRegistry",
    "Proposal",
    "ProposalView",
    "VaultState",
    "compute_content_hash",
]
