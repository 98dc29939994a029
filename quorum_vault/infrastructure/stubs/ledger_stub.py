"""In-memory ledger stub.

This module provides an in-memory implementation of LedgerPort for
development and testing.

Behavior:
- Balances are plain integers per address; unknown addresses hold 0
- An invocation first moves value, then runs the destination's
  registered contract handler (if any)
- If the sender cannot cover the amount, or the handler raises, the
  invocation reports failure and every balance moved during it is put
  back

Contract handlers may call back into the vault, which is how reentrant
execution is exercised in tests.

DEV MODE WARNING:
Balances live in memory only. Use only for development and testing.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from quorum_vault.application.ports.ledger import InvocationResult, LedgerPort

logger = logging.getLogger(__name__)

ContractHandler = Callable[[str, int, bytes], Awaitable[bytes | None]]
"""Handler run when a registered address is invoked: (sender, amount, payload)."""


class InMemoryLedgerStub(LedgerPort):
    """In-memory implementation of LedgerPort.

    Example:
        >>> ledger = InMemoryLedgerStub()
        >>> ledger.credit("0xvault", 10)
        >>> ledger.register_contract("0xvault", vault.handle_ledger_call)
        >>> await ledger.send("0xalice", "0xvault", 5)
    """

    def __init__(self) -> None:
        """Initialize an empty ledger."""
        self._balances: dict[str, int] = {}
        self._contracts: dict[str, ContractHandler] = {}
        self._invocations: list[tuple[str, str, int, bytes, bool]] = []

    def credit(self, address: str, amount: int) -> None:
        """Mint value into an address (test funding).

        Args:
            address: Identity to credit.
            amount: Value to add; must be non-negative.
        """
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        self._balances[address] = self._balances.get(address, 0) + amount

    def register_contract(self, address: str, handler: ContractHandler) -> None:
        """Attach code to an address; it runs on every invocation of it."""
        self._contracts[address] = handler

    def unregister_contract(self, address: str) -> None:
        self._contracts.pop(address, None)

    async def balance_of(self, address: str) -> int:
        return self._balances.get(address, 0)

    async def send(self, sender: str, recipient: str, amount: int) -> InvocationResult:
        """Plain value transfer (invocation with an empty payload)."""
        return await self.invoke(sender, recipient, amount, b"")

    async def invoke(
        self,
        sender: str,
        destination: str,
        amount: int,
        payload: bytes,
    ) -> InvocationResult:
        """Transfer value and run the destination's handler.

        Returns:
            InvocationResult. Failures are reported, never raised.
        """
        result = await self._invoke(sender, destination, amount, payload)
        self._invocations.append((sender, destination, amount, payload, result.success))
        return result

    async def _invoke(
        self,
        sender: str,
        destination: str,
        amount: int,
        payload: bytes,
    ) -> InvocationResult:
        if amount < 0:
            return InvocationResult.failed("negative_amount")
        if self._balances.get(sender, 0) < amount:
            logger.debug(
                "ledger_insufficient_balance",
                extra={
                    "sender": sender,
                    "destination": destination,
                    "amount": amount,
                    "balance": self._balances.get(sender, 0),
                },
            )
            return InvocationResult.failed("insufficient_balance")

        snapshot = dict(self._balances)
        self._balances[sender] = self._balances.get(sender, 0) - amount
        self._balances[destination] = self._balances.get(destination, 0) + amount

        handler = self._contracts.get(destination)
        if handler is None:
            return InvocationResult.ok()

        try:
            return_data = await handler(sender, amount, payload)
        except Exception as exc:
            # A reverting destination undoes everything moved during the call.
            self._balances = snapshot
            logger.debug(
                "ledger_invocation_reverted",
                extra={
                    "sender": sender,
                    "destination": destination,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return InvocationResult.failed(f"{type(exc).__name__}: {exc}")

        return InvocationResult.ok(return_data or b"")

    @property
    def invocation_count(self) -> int:
        return len(self._invocations)

    def get_invocations(self) -> list[tuple[str, str, int, bytes, bool]]:
        """Every invocation as (sender, destination, amount, payload, success)."""
        return list(self._invocations)

    def clear(self) -> None:
        """Reset balances, contracts and history (for test cleanup)."""
        self._balances.clear()
        self._contracts.clear()
        self._invocations.clear()
