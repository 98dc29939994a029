"""Execution guard service.

The single path by which an approved proposal takes effect.

Execution order:
1. Caller is an owner, proposal exists and is not executed
2. Confirmations reach the current threshold
3. Checkpoint the whole vault state
4. Mark the proposal executed (before control leaves the vault)
5. Invoke the destination, or dispatch to the owner registry when the
   destination is the vault itself
6. On any failure restore the checkpoint and re-raise

Marking before invoking means a destination that calls back into
execute for the same proposal sees it as executed and is rejected with
AlreadyExecutedError. Restoring the checkpoint, rather than unsetting
the flag by hand, also discards whatever the destination changed in the
vault during the invocation, together with the queued notifications.
"""

from __future__ import annotations

from pydantic import ValidationError
from structlog import get_logger

from quorum_vault.application.ports.ledger import LedgerPort
from quorum_vault.application.services.owner_registry_service import (
    OwnerRegistryService,
)
from quorum_vault.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from quorum_vault.domain.errors import InvocationFailedError, QuorumNotMetError
from quorum_vault.domain.events import DepositReceivedEvent, ProposalExecutedEvent
from quorum_vault.domain.models.governance_call import GovernanceCall
from quorum_vault.domain.models.proposal import Proposal, ProposalView
from quorum_vault.domain.models.vault_state import VaultState
from quorum_vault.domain.primitives import AtomicOperationContext

logger = get_logger(__name__)


class ExecutionGuardService:
    """Decides executability and performs the one-shot execution.

    Example:
        >>> guard = ExecutionGuardService(
        ...     state=state,
        ...     vault_address="0xvault",
        ...     ledger=ledger,
        ...     registry=registry_service,
        ...     proposals=proposal_ledger,
        ... )
        >>> view = await guard.execute(caller="alice", index=0)
        >>> view.executed
        True
    """

    def __init__(
        self,
        state: VaultState,
        vault_address: str,
        ledger: LedgerPort,
        registry: OwnerRegistryService,
        proposals: ProposalLedgerService,
    ) -> None:
        """Initialize the execution guard.

        Args:
            state: The vault aggregate.
            vault_address: Identity of the vault; proposals addressed here
                are dispatched to the owner registry.
            ledger: Ledger performing transfers and invocations.
            registry: Owner registry service.
            proposals: Proposal ledger service.
        """
        self._state = state
        self._vault_address = vault_address
        self._ledger = ledger
        self._registry = registry
        self._proposals = proposals

    async def execute(self, caller: str, index: int) -> ProposalView:
        """Execute an approved proposal.

        Args:
            caller: Owner triggering execution.
            index: Proposal to execute.

        Returns:
            Snapshot of the executed proposal.

        Raises:
            UnauthorizedError: caller is not an owner.
            UnknownProposalError: index is out of range.
            AlreadyExecutedError: the proposal has been executed (including
                a reentrant attempt made during its own invocation).
            QuorumNotMetError: not enough confirmations.
            InvocationFailedError: the destination invocation failed; the
                proposal is still unexecuted.
            OwnerRegistryError: a governance payload was rejected by the
                registry; the proposal is still unexecuted.
        """
        log = logger.bind(caller=caller, proposal_index=index)
        proposal = self._proposals.require_pending(caller, index, "execute")

        required = self._registry.required_confirmations
        if proposal.confirmation_count < required:
            log.warning(
                "execute_rejected",
                error_type="QuorumNotMetError",
                confirmations=proposal.confirmation_count,
                required=required,
            )
            raise QuorumNotMetError(index, proposal.confirmation_count, required)

        async with AtomicOperationContext(operation="execute") as ctx:
            checkpoint = self._state.checkpoint()
            ctx.add_rollback(lambda: self._state.restore(checkpoint))

            proposal.executed = True
            if proposal.destination == self._vault_address:
                return_data = await self._dispatch_to_self(proposal)
            else:
                return_data = await self._invoke_destination(proposal)

            self._state.record(
                ProposalExecutedEvent(
                    index=index,
                    executor=caller,
                    destination=proposal.destination,
                    amount=proposal.amount,
                    return_data=return_data,
                )
            )

        log.info(
            "proposal_executed",
            destination=proposal.destination,
            amount=proposal.amount,
        )
        return self._state.get_proposal(index).to_view()

    async def _invoke_destination(self, proposal: Proposal) -> bytes:
        result = await self._ledger.invoke(
            sender=self._vault_address,
            destination=proposal.destination,
            amount=proposal.amount,
            payload=proposal.payload,
        )
        if not result.success:
            logger.warning(
                "invocation_failed",
                proposal_index=proposal.index,
                destination=proposal.destination,
                amount=proposal.amount,
                reason=result.reason,
            )
            raise InvocationFailedError(proposal.index, proposal.destination, result.reason)
        return result.return_data

    async def _dispatch_to_self(self, proposal: Proposal) -> bytes:
        # Value sent to self never leaves the vault, but must still be covered.
        balance = await self._ledger.balance_of(self._vault_address)
        if balance < proposal.amount:
            logger.warning(
                "invocation_failed",
                proposal_index=proposal.index,
                destination=proposal.destination,
                amount=proposal.amount,
                reason="insufficient_balance",
            )
            raise InvocationFailedError(
                proposal.index, proposal.destination, "insufficient_balance"
            )

        if proposal.is_plain_transfer:
            self._state.record(
                DepositReceivedEvent(
                    sender=self._vault_address,
                    amount=proposal.amount,
                    balance=balance,
                )
            )
            return b""

        try:
            call = GovernanceCall.decode(proposal.payload)
        except ValidationError as exc:
            logger.warning(
                "governance_payload_invalid",
                proposal_index=proposal.index,
                error_count=exc.error_count(),
            )
            raise InvocationFailedError(
                proposal.index,
                proposal.destination,
                "payload is not a governance call",
            ) from exc

        logger.info(
            "governance_dispatch",
            proposal_index=proposal.index,
            method=call.method.value,
        )
        self._registry.apply(call)
        return b""
