"""Vault primitives for the Quorum Vault domain layer.

- AtomicOperationContext: all-or-nothing operations with rollback
- DeletePreventionMixin: proposals can never be deleted
- Quorum limits: owner floor, threshold floor, null identity
"""

from quorum_vault.domain.primitives.ensure_atomicity import AtomicOperationContext
from quorum_vault.domain.primitives.prevent_delete import (
    DeletePreventionMixin,
    ProposalDeletionError,
)
from quorum_vault.domain.primitives.quorum_limits import (
    MIN_CONFIRMATIONS,
    MIN_OWNERS,
    ZERO_ADDRESS,
    is_null_identity,
    threshold_bounds,
)

__all__: list[str] = [
    "AtomicOperationContext",
    "DeletePreventionMixin",
    "ProposalDeletionError",
    "MIN_CONFIRMATIONS",
    "MIN_OWNERS",
    "ZERO_ADDRESS",
    "is_null_identity",
    "threshold_bounds",
]
