"""Proposal domain models.

This module defines the proposal entity held by the proposal ledger:
- Proposal: mutable ledger entry (confirmation count, executed flag)
- ProposalView: immutable snapshot handed to readers

A proposal's index is assigned at creation, is dense and 0-based, and is
never reused. Proposals are never deleted. The executed flag only ever
moves from False to True.
"""

from __future__ import annotations

from dataclasses import dataclass

import blake3

from quorum_vault.domain.primitives.prevent_delete import DeletePreventionMixin


def compute_content_hash(destination: str, amount: int, payload: bytes) -> bytes:
    """Compute BLAKE3 hash of a proposed action.

    Args:
        destination: Target of the action.
        amount: Value to transfer.
        payload: Invocation payload.

    Returns:
        32-byte BLAKE3 hash of the canonical content.
    """
    content = f"{destination}|{amount}|{payload.hex()}".encode("utf-8")
    return blake3.blake3(content).digest()


@dataclass(frozen=True)
class ProposalView:
    """Read-only snapshot of a proposal.

    Attributes:
        index: Position in the proposal ledger.
        proposer: Owner who submitted the proposal.
        destination: Target of the action.
        amount: Value to transfer alongside the invocation.
        payload: Invocation payload (empty for plain transfers).
        executed: Whether the proposal has been executed.
        confirmation_count: Confirmations currently recorded.
    """

    index: int
    proposer: str
    destination: str
    amount: int
    payload: bytes
    executed: bool
    confirmation_count: int


@dataclass
class Proposal(DeletePreventionMixin):
    """A proposed action awaiting confirmations.

    Attributes:
        index: Position in the proposal ledger.
        proposer: Owner who submitted the proposal.
        destination: Target of the action.
        amount: Value to transfer; never negative.
        payload: Invocation payload (empty for plain transfers).
        executed: Set once, when execution commits.
        confirmation_count: Number of owners whose confirmation is set.
    """

    index: int
    proposer: str
    destination: str
    amount: int
    payload: bytes = b""
    executed: bool = False
    confirmation_count: int = 0

    def __post_init__(self) -> None:
        """Validate proposal fields after initialization.

        Raises:
            ValueError: If amount is negative or the index is negative.
        """
        if self.index < 0:
            raise ValueError(f"index must be non-negative, got {self.index}")
        if self.amount < 0:
            raise ValueError(f"amount must be non-negative, got {self.amount}")
        self.payload = bytes(self.payload)

    @property
    def is_plain_transfer(self) -> bool:
        return not self.payload

    def content_hash(self) -> bytes:
        """BLAKE3 hash of destination, amount and payload."""
        return compute_content_hash(self.destination, self.amount, self.payload)

    def to_view(self) -> ProposalView:
        """Take an immutable snapshot of this proposal."""
        return ProposalView(
            index=self.index,
            proposer=self.proposer,
            destination=self.destination,
            amount=self.amount,
            payload=self.payload,
            executed=self.executed,
            confirmation_count=self.confirmation_count,
        )
