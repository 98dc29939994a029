"""
Domain events for Quorum Vault.

Immutable, timestamped payloads describing committed state changes.
They are side-channel notifications for off-system observers; nothing
inside the vault reads them back.
"""

from typing import Union

from quorum_vault.domain.events.deposit import (
    DEPOSIT_RECEIVED_EVENT_TYPE,
    DepositReceivedEvent,
)
from quorum_vault.domain.events.governance import (
    OWNER_ADDED_EVENT_TYPE,
    OWNER_REMOVED_EVENT_TYPE,
    THRESHOLD_CHANGED_EVENT_TYPE,
    OwnerAddedEvent,
    OwnerRemovedEvent,
    ThresholdChangeReason,
    ThresholdChangedEvent,
)
from quorum_vault.domain.events.proposal import (
    CONFIRMATION_REVOKED_EVENT_TYPE,
    PROPOSAL_CONFIRMED_EVENT_TYPE,
    PROPOSAL_EXECUTED_EVENT_TYPE,
    PROPOSAL_SUBMITTED_EVENT_TYPE,
    ConfirmationRevokedEvent,
    ProposalConfirmedEvent,
    ProposalExecutedEvent,
    ProposalSubmittedEvent,
)

VaultEvent = Union[
    DepositReceivedEvent,
    ProposalSubmittedEvent,
    ProposalConfirmedEvent,
    ConfirmationRevokedEvent,
    ProposalExecutedEvent,
    OwnerAddedEvent,
    OwnerRemovedEvent,
    ThresholdChangedEvent,
]

__all__: list[str] = [
    "VaultEvent",
    "DEPOSIT_RECEIVED_EVENT_TYPE",
    "DepositReceivedEvent",
    "PROPOSAL_SUBMITTED_EVENT_TYPE",
    "PROPOSAL_CONFIRMED_EVENT_TYPE",
    "CONFIRMATION_REVOKED_EVENT_TYPE",
    "PROPOSAL_EXECUTED_EVENT_TYPE",
    "ProposalSubmittedEvent",
    "ProposalConfirmedEvent",
    "ConfirmationRevokedEvent",
    "ProposalExecutedEvent",
    "OWNER_ADDED_EVENT_TYPE",
    "OWNER_REMOVED_EVENT_TYPE",
    "THRESHOLD_CHANGED_EVENT_TYPE",
    "OwnerAddedEvent",
    "OwnerRemovedEvent",
    "ThresholdChangeReason",
    "ThresholdChangedEvent",
]
