"""Proposal lifecycle events for Quorum Vault.

This module defines the event payloads for the proposal state machine:
- ProposalSubmittedEvent: an owner proposed an action
- ProposalConfirmedEvent: an owner confirmed a proposal
- ConfirmationRevokedEvent: an owner withdrew a confirmation
- ProposalExecutedEvent: an approved proposal was realized

Events are queued in the vault outbox and only reach observers once the
operation that produced them commits. A rolled-back execution therefore
never announces anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

PROPOSAL_SUBMITTED_EVENT_TYPE: str = "vault.proposal.submitted"
PROPOSAL_CONFIRMED_EVENT_TYPE: str = "vault.proposal.confirmed"
CONFIRMATION_REVOKED_EVENT_TYPE: str = "vault.proposal.revoked"
PROPOSAL_EXECUTED_EVENT_TYPE: str = "vault.proposal.executed"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProposalSubmittedEvent:
    """Payload for a newly recorded proposal.

    Carries every supplied field plus the assigned index and the proposer.

    Attributes:
        index: Index assigned to the proposal.
        proposer: Owner who submitted it.
        destination: Target of the proposed action.
        amount: Value to transfer alongside the invocation.
        payload: Invocation payload (empty for plain transfers).
        content_hash: Hex BLAKE3 hash of destination, amount and payload.
        occurred_at: When the proposal was recorded (UTC).
    """

    index: int
    proposer: str
    destination: str
    amount: int
    payload: bytes
    content_hash: str
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return PROPOSAL_SUBMITTED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for delivery to observers.

        Returns:
            Dictionary with all payload fields; the payload is hex encoded.
        """
        return {
            "event_type": self.event_type,
            "index": self.index,
            "proposer": self.proposer,
            "destination": self.destination,
            "amount": self.amount,
            "payload": self.payload.hex(),
            "content_hash": self.content_hash,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class ProposalConfirmedEvent:
    """Payload for an owner confirmation.

    Attributes:
        index: Proposal that was confirmed.
        owner: Owner who confirmed.
        confirmation_count: Confirmations recorded after this one.
        occurred_at: When the confirmation was recorded (UTC).
    """

    index: int
    owner: str
    confirmation_count: int
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return PROPOSAL_CONFIRMED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "index": self.index,
            "owner": self.owner,
            "confirmation_count": self.confirmation_count,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class ConfirmationRevokedEvent:
    """Payload for a withdrawn confirmation.

    Attributes:
        index: Proposal whose confirmation was withdrawn.
        owner: Owner who revoked.
        confirmation_count: Confirmations remaining after the revocation.
        occurred_at: When the revocation was recorded (UTC).
    """

    index: int
    owner: str
    confirmation_count: int
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return CONFIRMATION_REVOKED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "index": self.index,
            "owner": self.owner,
            "confirmation_count": self.confirmation_count,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class ProposalExecutedEvent:
    """Payload for a successfully executed proposal.

    Attributes:
        index: Proposal that was executed.
        executor: Owner who triggered execution.
        destination: Target that was invoked.
        amount: Value transferred.
        return_data: Data returned by the destination, if any.
        occurred_at: When execution committed (UTC).
    """

    index: int
    executor: str
    destination: str
    amount: int
    return_data: bytes = b""
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return PROPOSAL_EXECUTED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "index": self.index,
            "executor": self.executor,
            "destination": self.destination,
            "amount": self.amount,
            "return_data": self.return_data.hex(),
            "occurred_at": self.occurred_at.isoformat(),
        }
