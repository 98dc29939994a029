"""Proposal ledger service.

Append-only store of proposed actions and per-owner confirmation state.

Rules:
- Only current owners may propose, confirm or revoke
- Destination, amount and payload are not otherwise validated; zero
  amounts, empty payloads and the vault's own address are all accepted
- Each (owner, proposal) pair alternates strictly between confirmed and
  unconfirmed, so a confirmation count can never go negative
- Executed proposals accept no further confirmations or revocations

Checks run in a fixed order: caller, proposal existence, executed flag,
then the caller's confirmation flag.
"""

from __future__ import annotations

from structlog import get_logger

from quorum_vault.application.services.owner_registry_service import (
    OwnerRegistryService,
)
from quorum_vault.domain.errors import (
    AlreadyConfirmedError,
    AlreadyExecutedError,
    NotConfirmedError,
    ProposalError,
)
from quorum_vault.domain.events import (
    ConfirmationRevokedEvent,
    ProposalConfirmedEvent,
    ProposalSubmittedEvent,
)
from quorum_vault.domain.models.proposal import Proposal, ProposalView
from quorum_vault.domain.models.vault_state import VaultState

logger = get_logger(__name__)


class ProposalLedgerService:
    """Creation of proposals and toggling of owner confirmations.

    Example:
        >>> ledger = ProposalLedgerService(state, registry_service)
        >>> index = ledger.propose("alice", "0xrecipient", 1, b"")
        >>> ledger.confirm("alice", index)
        1
    """

    def __init__(self, state: VaultState, registry: OwnerRegistryService) -> None:
        """Initialize the proposal ledger service.

        Args:
            state: The vault aggregate.
            registry: Service answering who may act.
        """
        self._state = state
        self._registry = registry

    @property
    def proposal_count(self) -> int:
        return self._state.proposal_count

    def get_proposal(self, index: int) -> ProposalView:
        """Read a proposal by index.

        Raises:
            UnknownProposalError: index is out of range.
        """
        return self._state.get_proposal(index).to_view()

    def is_confirmed(self, index: int, owner: str) -> bool:
        """Check an owner's confirmation flag for a proposal.

        Raises:
            UnknownProposalError: index is out of range.
        """
        self._state.get_proposal(index)
        return self._state.is_confirmed(index, owner)

    def require_pending(self, caller: str, index: int, operation: str) -> Proposal:
        """Resolve a proposal that an owner may still act on.

        Args:
            caller: Identity supplied by the execution substrate.
            index: Proposal index.
            operation: Operation name for errors and log entries.

        Returns:
            The live (unexecuted) proposal.

        Raises:
            UnauthorizedError: caller is not an owner.
            UnknownProposalError: index is out of range.
            AlreadyExecutedError: the proposal has been executed.
        """
        self._registry.require_owner(caller, operation)
        try:
            proposal = self._state.get_proposal(index)
            if proposal.executed:
                raise AlreadyExecutedError(index)
        except ProposalError as exc:
            logger.warning(
                f"{operation}_rejected",
                caller=caller,
                proposal_index=index,
                error_type=type(exc).__name__,
            )
            raise
        return proposal

    def propose(
        self,
        caller: str,
        destination: str,
        amount: int,
        payload: bytes = b"",
    ) -> int:
        """Record a new proposal.

        Args:
            caller: Proposing owner.
            destination: Target of the action.
            amount: Value to transfer alongside the invocation.
            payload: Invocation payload (empty for a plain transfer).

        Returns:
            The index assigned to the new proposal.

        Raises:
            UnauthorizedError: caller is not an owner.
            ValueError: amount is negative.
        """
        self._registry.require_owner(caller, "propose")

        proposal = Proposal(
            index=self._state.proposal_count,
            proposer=caller,
            destination=destination,
            amount=amount,
            payload=payload,
        )
        self._state.append_proposal(proposal)
        self._state.record(
            ProposalSubmittedEvent(
                index=proposal.index,
                proposer=caller,
                destination=destination,
                amount=amount,
                payload=proposal.payload,
                content_hash=proposal.content_hash().hex(),
            )
        )
        logger.info(
            "proposal_submitted",
            caller=caller,
            proposal_index=proposal.index,
            destination=destination,
            amount=amount,
            payload_size=len(proposal.payload),
        )
        return proposal.index

    def confirm(self, caller: str, index: int) -> int:
        """Set the caller's confirmation on a proposal.

        Returns:
            The proposal's new confirmation count.

        Raises:
            UnauthorizedError: caller is not an owner.
            UnknownProposalError: index is out of range.
            AlreadyExecutedError: the proposal has been executed.
            AlreadyConfirmedError: caller already confirmed.
        """
        self.require_pending(caller, index, "confirm")
        if self._state.is_confirmed(index, caller):
            logger.warning(
                "confirm_rejected",
                caller=caller,
                proposal_index=index,
                error_type="AlreadyConfirmedError",
            )
            raise AlreadyConfirmedError(index, caller)

        count = self._state.set_confirmation(index, caller)
        self._state.record(
            ProposalConfirmedEvent(index=index, owner=caller, confirmation_count=count)
        )
        logger.info(
            "proposal_confirmed",
            caller=caller,
            proposal_index=index,
            confirmation_count=count,
        )
        return count

    def revoke(self, caller: str, index: int) -> int:
        """Clear the caller's confirmation on a proposal.

        Returns:
            The proposal's new confirmation count.

        Raises:
            UnauthorizedError: caller is not an owner.
            UnknownProposalError: index is out of range.
            AlreadyExecutedError: the proposal has been executed.
            NotConfirmedError: caller has not confirmed.
        """
        self.require_pending(caller, index, "revoke")
        if not self._state.is_confirmed(index, caller):
            logger.warning(
                "revoke_rejected",
                caller=caller,
                proposal_index=index,
                error_type="NotConfirmedError",
            )
            raise NotConfirmedError(index, caller)

        count = self._state.clear_confirmation(index, caller)
        self._state.record(
            ConfirmationRevokedEvent(index=index, owner=caller, confirmation_count=count)
        )
        logger.info(
            "confirmation_revoked",
            caller=caller,
            proposal_index=index,
            confirmation_count=count,
        )
        return count
