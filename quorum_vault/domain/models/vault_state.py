"""Vault state aggregate.

Everything a vault knows lives in one VaultState owned by exactly one
vault instance: the owner registry, the append-only proposal list, the
confirmation relation and the outbox of notifications waiting for the
current operation to commit.

Invariant: for every proposal, confirmation_count equals the number of
identities recorded in confirmations for its index.

The checkpoint/restore pair is the transactional boundary used by
execution. Restoring swaps every field back to the checkpoint copy, so
nested changes made while control was outside the vault disappear along
with the executed flag.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from quorum_vault.domain.errors.proposal import UnknownProposalError
from quorum_vault.domain.models.owner_registry import OwnerRegistry
from quorum_vault.domain.models.proposal import Proposal

if TYPE_CHECKING:
    from quorum_vault.domain.events import VaultEvent


@dataclass
class VaultState:
    """Single owned aggregate of all vault state.

    Attributes:
        registry: Owner set and threshold.
        proposals: Append-only proposal list; position equals index.
        confirmations: Proposal index -> owners whose confirmation is set.
        outbox: Notifications queued by the running operation.
    """

    registry: OwnerRegistry
    proposals: list[Proposal] = field(default_factory=list)
    confirmations: dict[int, set[str]] = field(default_factory=dict)
    outbox: list["VaultEvent"] = field(default_factory=list)

    @property
    def proposal_count(self) -> int:
        return len(self.proposals)

    def get_proposal(self, index: int) -> Proposal:
        """Look up a proposal by index.

        Raises:
            UnknownProposalError: index is out of range.
        """
        if not 0 <= index < len(self.proposals):
            raise UnknownProposalError(index, len(self.proposals))
        return self.proposals[index]

    def append_proposal(self, proposal: Proposal) -> None:
        if proposal.index != len(self.proposals):
            raise ValueError(
                f"proposal index {proposal.index} does not match next index "
                f"{len(self.proposals)}"
            )
        self.proposals.append(proposal)
        self.confirmations[proposal.index] = set()

    def is_confirmed(self, index: int, owner: str) -> bool:
        return owner in self.confirmations.get(index, set())

    def confirmed_by(self, index: int) -> frozenset[str]:
        """Identities whose confirmation is currently set for a proposal."""
        return frozenset(self.confirmations.get(index, set()))

    def set_confirmation(self, index: int, owner: str) -> int:
        """Set an owner's confirmation flag and bump the count.

        Returns:
            The new confirmation count.
        """
        proposal = self.get_proposal(index)
        self.confirmations.setdefault(index, set()).add(owner)
        proposal.confirmation_count += 1
        return proposal.confirmation_count

    def clear_confirmation(self, index: int, owner: str) -> int:
        """Clear an owner's confirmation flag and drop the count.

        Returns:
            The new confirmation count.
        """
        proposal = self.get_proposal(index)
        self.confirmations[index].discard(owner)
        proposal.confirmation_count -= 1
        return proposal.confirmation_count

    def record(self, event: "VaultEvent") -> None:
        """Queue a notification for delivery when the operation commits."""
        self.outbox.append(event)

    def drain_outbox(self) -> list["VaultEvent"]:
        """Remove and return every queued notification, oldest first."""
        pending = list(self.outbox)
        self.outbox.clear()
        return pending

    def checkpoint(self) -> VaultState:
        """Take a deep copy of the whole aggregate."""
        return copy.deepcopy(self)

    def restore(self, checkpoint: VaultState) -> None:
        """Replace every field with the values held by a checkpoint."""
        self.registry = checkpoint.registry
        self.proposals = checkpoint.proposals
        self.confirmations = checkpoint.confirmations
        self.outbox = checkpoint.outbox
