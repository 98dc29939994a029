"""Domain errors for Quorum Vault.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from VaultError.
"""

from quorum_vault.domain.errors.authorization import (
    AuthorizationError,
    UnauthorizedError,
)
from quorum_vault.domain.errors.execution import (
    ExecutionError,
    InvocationFailedError,
    UnsupportedCallError,
)
from quorum_vault.domain.errors.owner_registry import (
    DuplicateOwnerError,
    InvalidConfigurationError,
    InvalidOwnerError,
    InvalidThresholdError,
    OwnerRegistryError,
    QuorumFloorViolationError,
    UnknownOwnerError,
)
from quorum_vault.domain.errors.proposal import (
    AlreadyConfirmedError,
    AlreadyExecutedError,
    NotConfirmedError,
    ProposalError,
    QuorumNotMetError,
    UnknownProposalError,
)

__all__: list[str] = [
    "AuthorizationError",
    "UnauthorizedError",
    "OwnerRegistryError",
    "InvalidConfigurationError",
    "InvalidThresholdError",
    "InvalidOwnerError",
    "DuplicateOwnerError",
    "UnknownOwnerError",
    "QuorumFloorViolationError",
    "ProposalError",
    "UnknownProposalError",
    "AlreadyExecutedError",
    "AlreadyConfirmedError",
    "NotConfirmedError",
    "QuorumNotMetError",
    "ExecutionError",
    "InvocationFailedError",
    "UnsupportedCallError",
]
