"""Ledger port.

The ledger is the execution substrate that holds balances and actually
performs value transfers and destination invocations. The vault only
decides whether and with what parameters to invoke it, then reacts to
the reported outcome.

Follows hexagonal architecture with port/adapter pattern.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of a ledger invocation.

    Attributes:
        success: Whether the transfer and invocation both succeeded.
        return_data: Data returned by the destination.
        reason: Failure reason when success is False.
    """

    success: bool
    return_data: bytes = b""
    reason: str | None = None

    @classmethod
    def ok(cls, return_data: bytes = b"") -> "InvocationResult":
        return cls(success=True, return_data=return_data)

    @classmethod
    def failed(cls, reason: str) -> "InvocationResult":
        return cls(success=False, reason=reason)


class LedgerPort(Protocol):
    """Protocol for the ledger that moves value and runs invocations.

    Implementations must be all-or-nothing per invocation: when an
    invocation reports failure, no value has moved.
    """

    @abstractmethod
    async def invoke(
        self,
        sender: str,
        destination: str,
        amount: int,
        payload: bytes,
    ) -> InvocationResult:
        """Transfer value and invoke a destination.

        The destination may run code during the invocation, including
        calls back into the vault.

        Args:
            sender: Identity the value is taken from.
            destination: Identity receiving the value and payload.
            amount: Value to transfer.
            payload: Invocation payload (empty for a plain transfer).

        Returns:
            InvocationResult describing the outcome. Failures are reported,
            not raised.
        """
        ...

    @abstractmethod
    async def balance_of(self, address: str) -> int:
        """Get the balance held by an address.

        Args:
            address: Identity to query.

        Returns:
            Current balance (0 for unknown addresses).
        """
        ...
