"""Quorum vault facade.

The vault is the single authority domain. It composes the owner
registry, the proposal ledger and the execution guard over one owned
VaultState, and is the only surface exposed to callers.

Serialization:
Every boundary operation runs with exclusive access to the state. A
task holding the vault may re-enter it (a destination calling back
during execution); other tasks wait. Each operation fully commits or
fully reverts.

Notifications:
Operations queue notifications in the state outbox. The outermost
operation flushes them to the emitter only after it commits, so
observers never hear about changes that were rolled back.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from pydantic import ValidationError
from structlog import get_logger

from quorum_vault.application.ports.event_emitter import VaultEventEmitterProtocol
from quorum_vault.application.ports.ledger import LedgerPort
from quorum_vault.application.services.execution_guard_service import (
    ExecutionGuardService,
)
from quorum_vault.application.services.owner_registry_service import (
    OwnerRegistryService,
)
from quorum_vault.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from quorum_vault.domain.errors import UnsupportedCallError
from quorum_vault.domain.events import DepositReceivedEvent
from quorum_vault.domain.models.governance_call import GovernanceCall, GovernanceMethod
from quorum_vault.domain.models.owner_registry import OwnerRegistry
from quorum_vault.domain.models.proposal import ProposalView
from quorum_vault.domain.models.vault_state import VaultState
from quorum_vault.domain.primitives import is_null_identity

logger = get_logger(__name__)


class QuorumVault:
    """M-of-N guarded action vault.

    Example:
        >>> vault = QuorumVault(
        ...     address="0xvault",
        ...     owners=["alice", "bob", "carol"],
        ...     required_confirmations=2,
        ...     ledger=ledger,
        ...     emitter=emitter,
        ... )
        >>> index = await vault.propose("alice", "0xrecipient", 1)
        >>> await vault.confirm("alice", index)
        >>> await vault.confirm("bob", index)
        >>> await vault.execute("carol", index)
    """

    def __init__(
        self,
        address: str,
        owners: Sequence[str],
        required_confirmations: int,
        ledger: LedgerPort,
        emitter: VaultEventEmitterProtocol,
    ) -> None:
        """Construct a vault.

        Args:
            address: Identity of the vault on the ledger.
            owners: Initial owners, in order.
            required_confirmations: Confirmations a proposal needs.
            ledger: Ledger holding balances and running invocations.
            emitter: Destination for committed notifications.

        Raises:
            ValueError: address is the null identity.
            InvalidConfigurationError: fewer than MIN_OWNERS owners.
            InvalidThresholdError: threshold outside [MIN_CONFIRMATIONS, owners].
            InvalidOwnerError: an owner is the null identity.
            DuplicateOwnerError: an owner appears twice.
        """
        if is_null_identity(address):
            raise ValueError("vault address must not be the null identity")

        self._address = address
        self._ledger = ledger
        self._emitter = emitter
        self._state = VaultState(registry=OwnerRegistry(owners, required_confirmations))
        self._registry = OwnerRegistryService(self._state, address)
        self._proposals = ProposalLedgerService(self._state, self._registry)
        self._guard = ExecutionGuardService(
            state=self._state,
            vault_address=address,
            ledger=ledger,
            registry=self._registry,
            proposals=self._proposals,
        )
        self._lock = asyncio.Lock()
        self._holder: asyncio.Task[Any] | None = None

        logger.info(
            "vault_constructed",
            vault_address=address,
            owner_count=len(self._registry.owners),
            required_confirmations=required_confirmations,
        )

    @property
    def address(self) -> str:
        return self._address

    @asynccontextmanager
    async def _operation(self) -> AsyncIterator[None]:
        task = asyncio.current_task()
        if task is not None and self._holder is task:
            # Re-entry from a destination invoked by this same task.
            yield
            return

        async with self._lock:
            self._holder = task
            try:
                try:
                    yield
                except BaseException:
                    self._state.outbox.clear()
                    raise
                # State is committed; emitter failures propagate but do not revert it.
                for event in self._state.drain_outbox():
                    await self._emitter.emit(event)
            finally:
                self._holder = None

    # Boundary operations

    async def receive(self, sender: str, amount: int) -> int:
        """Record value received from any sender.

        The ledger has already credited the vault; this announces the
        deposit with the resulting balance.

        Args:
            sender: Identity that sent the value.
            amount: Value received.

        Returns:
            The vault balance after the deposit.

        Raises:
            ValueError: amount is negative.
        """
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        async with self._operation():
            balance = await self._ledger.balance_of(self._address)
            self._state.record(
                DepositReceivedEvent(sender=sender, amount=amount, balance=balance)
            )
            logger.info("deposit_received", sender=sender, amount=amount, balance=balance)
            return balance

    async def propose(
        self,
        caller: str,
        destination: str,
        amount: int,
        payload: bytes = b"",
    ) -> int:
        """Submit a proposal. See ProposalLedgerService.propose."""
        async with self._operation():
            return self._proposals.propose(caller, destination, amount, payload)

    async def confirm(self, caller: str, index: int) -> int:
        """Confirm a proposal. See ProposalLedgerService.confirm."""
        async with self._operation():
            return self._proposals.confirm(caller, index)

    async def revoke(self, caller: str, index: int) -> int:
        """Revoke a confirmation. See ProposalLedgerService.revoke."""
        async with self._operation():
            return self._proposals.revoke(caller, index)

    async def execute(self, caller: str, index: int) -> ProposalView:
        """Execute an approved proposal. See ExecutionGuardService.execute."""
        async with self._operation():
            return await self._guard.execute(caller, index)

    async def add_owner(self, caller: str, owner: str) -> None:
        """Add an owner. Only reachable through an executed proposal."""
        async with self._operation():
            self._registry.add_owner(caller, owner)

    async def remove_owner(self, caller: str, owner: str) -> None:
        """Remove an owner. Only reachable through an executed proposal."""
        async with self._operation():
            self._registry.remove_owner(caller, owner)

    async def set_threshold(self, caller: str, required_confirmations: int) -> None:
        """Change the threshold. Only reachable through an executed proposal."""
        async with self._operation():
            self._registry.set_threshold(caller, required_confirmations)

    async def handle_ledger_call(self, sender: str, amount: int, payload: bytes) -> bytes:
        """Entry point for ledger invocations addressed to the vault.

        Register this as the vault's contract handler on the ledger. Plain
        transfers are deposits. Governance payloads are routed to the
        privileged operations with the real sender as caller, so they are
        always refused; governance only happens through executed proposals.

        Returns:
            Empty return data.

        Raises:
            UnauthorizedError: any governance payload.
            UnsupportedCallError: any other payload.
        """
        if not payload:
            await self.receive(sender, amount)
            return b""

        try:
            call = GovernanceCall.decode(payload)
        except ValidationError as exc:
            logger.warning("unsupported_vault_call", sender=sender)
            raise UnsupportedCallError(sender) from exc

        if call.method == GovernanceMethod.ADD_OWNER:
            await self.add_owner(sender, call.owner)
        elif call.method == GovernanceMethod.REMOVE_OWNER:
            await self.remove_owner(sender, call.owner)
        else:
            await self.set_threshold(sender, call.required_confirmations)
        return b""

    # Reads

    def get_owners(self) -> tuple[str, ...]:
        """Owners in current enumeration order (not stable across removals)."""
        return self._registry.owners

    def is_owner(self, identity: str) -> bool:
        return self._registry.is_owner(identity)

    @property
    def required_confirmations(self) -> int:
        return self._registry.required_confirmations

    def get_proposal_count(self) -> int:
        return self._proposals.proposal_count

    def get_proposal(self, index: int) -> ProposalView:
        """Read a proposal by index.

        Raises:
            UnknownProposalError: index is out of range.
        """
        return self._proposals.get_proposal(index)

    def is_confirmed(self, index: int, owner: str) -> bool:
        """Check an owner's confirmation flag for a proposal.

        Raises:
            UnknownProposalError: index is out of range.
        """
        return self._proposals.is_confirmed(index, owner)

    def confirmed_by(self, index: int) -> frozenset[str]:
        """Identities whose confirmation is set for a proposal.

        Raises:
            UnknownProposalError: index is out of range.
        """
        self._proposals.get_proposal(index)
        return self._state.confirmed_by(index)

    async def get_balance(self) -> int:
        """Vault balance as reported by the ledger."""
        return await self._ledger.balance_of(self._address)

    async def summary(self) -> dict[str, Any]:
        """Describe the vault for post-deployment verification.

        Returns:
            Address, owners, threshold, proposal count and balance.
        """
        return {
            "vault_address": self._address,
            "owners": list(self.get_owners()),
            "required_confirmations": self.required_confirmations,
            "proposal_count": self.get_proposal_count(),
            "balance": await self.get_balance(),
        }
