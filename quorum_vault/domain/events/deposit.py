"""Deposit events for Quorum Vault.

Anyone may send value to the vault. Each receipt is announced with the
sender, the amount and the resulting vault balance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

DEPOSIT_RECEIVED_EVENT_TYPE: str = "vault.deposit.received"


@dataclass(frozen=True)
class DepositReceivedEvent:
    """Payload for value received by the vault.

    Attributes:
        sender: Identity that sent the value.
        amount: Value received.
        balance: Vault balance after the deposit.
        occurred_at: When the deposit was recorded (UTC).
    """

    sender: str
    amount: int
    balance: int
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def event_type(self) -> str:
        return DEPOSIT_RECEIVED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for delivery to observers."""
        return {
            "event_type": self.event_type,
            "sender": self.sender,
            "amount": self.amount,
            "balance": self.balance,
            "occurred_at": self.occurred_at.isoformat(),
        }
