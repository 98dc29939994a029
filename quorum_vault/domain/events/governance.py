"""Governance events for Quorum Vault.

Emitted when the owner set or the confirmation threshold changes. These
changes only ever happen as the result of an executed self-addressed
proposal, so every governance event is accompanied by a
ProposalExecutedEvent from the same operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

OWNER_ADDED_EVENT_TYPE: str = "vault.owner.added"
OWNER_REMOVED_EVENT_TYPE: str = "vault.owner.removed"
THRESHOLD_CHANGED_EVENT_TYPE: str = "vault.threshold.changed"


class ThresholdChangeReason(StrEnum):
    """Why the confirmation threshold changed."""

    SET = "set"
    CLAMPED = "clamped"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OwnerAddedEvent:
    """Payload for an owner joining the vault.

    Attributes:
        owner: The new owner.
        owner_count: Number of owners after the addition.
        occurred_at: When the change was applied (UTC).
    """

    owner: str
    owner_count: int
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return OWNER_ADDED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "owner": self.owner,
            "owner_count": self.owner_count,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class OwnerRemovedEvent:
    """Payload for an owner leaving the vault.

    Attributes:
        owner: The removed owner.
        owner_count: Number of owners after the removal.
        occurred_at: When the change was applied (UTC).
    """

    owner: str
    owner_count: int
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return OWNER_REMOVED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "owner": self.owner,
            "owner_count": self.owner_count,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class ThresholdChangedEvent:
    """Payload for a confirmation threshold change.

    Attributes:
        previous_value: Threshold before the change.
        new_value: Threshold after the change.
        reason: SET for an explicit change, CLAMPED when an owner removal
            forced the threshold down to the new owner count.
        occurred_at: When the change was applied (UTC).
    """

    previous_value: int
    new_value: int
    reason: ThresholdChangeReason = ThresholdChangeReason.SET
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return THRESHOLD_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "previous_value": self.previous_value,
            "new_value": self.new_value,
            "reason": self.reason.value,
            "occurred_at": self.occurred_at.isoformat(),
        }
