"""Proposal errors for Quorum Vault.

Raised by the proposal ledger and the execution guard when a proposal
cannot be confirmed, revoked or executed.
"""

from __future__ import annotations

from quorum_vault.domain.exceptions import VaultError


class ProposalError(VaultError):
    """Base class for proposal lifecycle violations.

    Attributes:
        index: Index of the proposal involved.
    """

    def __init__(self, index: int, message: str) -> None:
        self.index = index
        super().__init__(message)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["proposal_index"] = self.index
        return result


class UnknownProposalError(ProposalError):
    """Raised when a proposal index is out of range."""

    def __init__(self, index: int, proposal_count: int) -> None:
        self.proposal_count = proposal_count
        super().__init__(
            index,
            f"Proposal {index} does not exist ({proposal_count} proposals recorded)",
        )


class AlreadyExecutedError(ProposalError):
    """Raised when a proposal has already been executed.

    Executed is terminal: no confirmation, revocation or second execution
    is accepted afterwards.
    """

    def __init__(self, index: int) -> None:
        super().__init__(index, f"Proposal {index} has already been executed")


class AlreadyConfirmedError(ProposalError):
    """Raised when an owner confirms the same proposal twice.

    Attributes:
        owner: The owner whose confirmation is already recorded.
    """

    def __init__(self, index: int, owner: str) -> None:
        self.owner = owner
        super().__init__(index, f"Owner {owner!r} already confirmed proposal {index}")


class NotConfirmedError(ProposalError):
    """Raised when an owner revokes a confirmation they never gave.

    Attributes:
        owner: The owner without a confirmation on record.
    """

    def __init__(self, index: int, owner: str) -> None:
        self.owner = owner
        super().__init__(index, f"Owner {owner!r} has not confirmed proposal {index}")


class QuorumNotMetError(ProposalError):
    """Raised when executing a proposal that lacks enough confirmations.

    Attributes:
        confirmations: Confirmations currently recorded.
        required: Confirmations the threshold demands.
    """

    def __init__(self, index: int, confirmations: int, required: int) -> None:
        self.confirmations = confirmations
        self.required = required
        super().__init__(
            index,
            f"Proposal {index} has {confirmations} of {required} required confirmations",
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update(confirmations=self.confirmations, required=self.required)
        return result
