"""Owner registry service.

Guards the owner set and the quorum threshold. Two kinds of callers use it:

- The proposal ledger and execution guard ask it who may act
  (require_owner).
- The execution guard applies decoded self-governance calls through
  apply(), an internal dispatch that never goes back out through the
  ledger.

add_owner, remove_owner and set_threshold only accept the vault itself as
caller, and only while apply() is dispatching an executed proposal
addressed to the vault. Called from anywhere else they raise
UnauthorizedError, whatever caller is claimed, so these changes need the
same quorum as any value transfer.

Every change queues a notification in the vault outbox. A threshold
clamp caused by an owner removal queues a ThresholdChangedEvent with
reason CLAMPED, without any explicit set_threshold call. Adding owners
never raises the threshold back.
"""

from __future__ import annotations

from structlog import get_logger

from quorum_vault.domain.errors import OwnerRegistryError, UnauthorizedError
from quorum_vault.domain.events import (
    OwnerAddedEvent,
    OwnerRemovedEvent,
    ThresholdChangedEvent,
    ThresholdChangeReason,
)
from quorum_vault.domain.models.governance_call import GovernanceCall, GovernanceMethod
from quorum_vault.domain.models.vault_state import VaultState

logger = get_logger(__name__)


class OwnerRegistryService:
    """Membership checks and self-governance mutations for one vault.

    Attributes:
        _state: The vault aggregate this service works on.
        _vault_address: Identity of the vault; the only privileged caller.
        _dispatching: True only while apply() runs a governance call.
    """

    def __init__(self, state: VaultState, vault_address: str) -> None:
        """Initialize the owner registry service.

        Args:
            state: The vault aggregate. The registry is always read through
                it, never cached, so checkpoint restores are picked up.
            vault_address: Identity of the vault itself.
        """
        self._state = state
        self._vault_address = vault_address
        self._dispatching = False

    @property
    def owners(self) -> tuple[str, ...]:
        return self._state.registry.owners

    @property
    def required_confirmations(self) -> int:
        return self._state.registry.required_confirmations

    def is_owner(self, identity: str) -> bool:
        return self._state.registry.is_owner(identity)

    def require_owner(self, caller: str, operation: str) -> None:
        """Reject callers that are not current owners.

        Args:
            caller: Identity supplied by the execution substrate.
            operation: Operation name for the error and the log entry.

        Raises:
            UnauthorizedError: caller is not an owner.
        """
        if not self._state.registry.is_owner(caller):
            logger.warning("caller_not_owner", caller=caller, operation=operation)
            raise UnauthorizedError(caller, operation)

    def require_self(self, caller: str, operation: str) -> None:
        """Reject every caller except the vault dispatching a governance call.

        Raises:
            UnauthorizedError: caller is not the vault, or no executed
                proposal is being dispatched.
        """
        if caller != self._vault_address or not self._dispatching:
            logger.warning("caller_not_vault", caller=caller, operation=operation)
            raise UnauthorizedError(caller, operation)

    def apply(self, call: GovernanceCall) -> None:
        """Apply a decoded self-governance call on behalf of the vault.

        Only the execution guard calls this, while it executes a proposal
        addressed to the vault itself.

        Args:
            call: The governance call carried by the proposal payload.

        Raises:
            OwnerRegistryError: the registry rejected the change.
        """
        caller = self._vault_address
        self._dispatching = True
        try:
            if call.method == GovernanceMethod.ADD_OWNER:
                self.add_owner(caller, call.owner)
            elif call.method == GovernanceMethod.REMOVE_OWNER:
                self.remove_owner(caller, call.owner)
            else:
                self.set_threshold(caller, call.required_confirmations)
        except OwnerRegistryError as exc:
            logger.warning(
                "governance_call_rejected",
                method=call.method.value,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise
        finally:
            self._dispatching = False

    def add_owner(self, caller: str, owner: str) -> None:
        """Add an owner and queue an OwnerAddedEvent.

        Raises:
            UnauthorizedError: caller is not the vault.
            InvalidOwnerError: owner is the null identity.
            DuplicateOwnerError: owner is already registered.
        """
        self.require_self(caller, "add_owner")
        registry = self._state.registry
        registry.add(owner)
        self._state.record(OwnerAddedEvent(owner=owner, owner_count=registry.owner_count))
        logger.info("owner_added", owner=owner, owner_count=registry.owner_count)

    def remove_owner(self, caller: str, owner: str) -> None:
        """Remove an owner, clamping the threshold if needed.

        Queues an OwnerRemovedEvent, preceded by a ThresholdChangedEvent
        when the threshold had to be clamped.

        Raises:
            UnauthorizedError: caller is not the vault.
            UnknownOwnerError: owner is not registered.
            QuorumFloorViolationError: the owner set is already at its floor.
        """
        self.require_self(caller, "remove_owner")
        registry = self._state.registry
        clamped_from = registry.remove(owner)
        if clamped_from is not None:
            self._state.record(
                ThresholdChangedEvent(
                    previous_value=clamped_from,
                    new_value=registry.required_confirmations,
                    reason=ThresholdChangeReason.CLAMPED,
                )
            )
            logger.info(
                "threshold_clamped",
                previous_value=clamped_from,
                new_value=registry.required_confirmations,
            )
        self._state.record(
            OwnerRemovedEvent(owner=owner, owner_count=registry.owner_count)
        )
        logger.info("owner_removed", owner=owner, owner_count=registry.owner_count)

    def set_threshold(self, caller: str, required_confirmations: int) -> None:
        """Change the threshold and queue a ThresholdChangedEvent.

        Raises:
            UnauthorizedError: caller is not the vault.
            InvalidThresholdError: value outside [MIN_CONFIRMATIONS, owners].
        """
        self.require_self(caller, "set_threshold")
        previous = self._state.registry.set_threshold(required_confirmations)
        self._state.record(
            ThresholdChangedEvent(
                previous_value=previous,
                new_value=required_confirmations,
                reason=ThresholdChangeReason.SET,
            )
        )
        logger.info(
            "threshold_changed",
            previous_value=previous,
            new_value=required_confirmations,
        )
