"""Execution errors for Quorum Vault."""

from __future__ import annotations

from quorum_vault.domain.exceptions import VaultError


class ExecutionError(VaultError):
    """Base class for failures while realizing an approved proposal."""

    pass


class InvocationFailedError(ExecutionError):
    """Raised when the destination invocation reports failure.

    The whole execution has been rolled back: the proposal is still
    unexecuted and may be retried later (for example after funding).

    Attributes:
        index: Index of the proposal whose execution failed.
        destination: Target of the failed invocation.
        reason: Failure reason reported by the ledger, if any.
    """

    def __init__(self, index: int, destination: str, reason: str | None = None) -> None:
        self.index = index
        self.destination = destination
        self.reason = reason
        message = f"Invocation of proposal {index} against {destination!r} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update(
            proposal_index=self.index,
            destination=self.destination,
            reason=self.reason,
        )
        return result


class UnsupportedCallError(ExecutionError):
    """Raised when the vault is called with a payload it does not understand.

    The vault only accepts plain value transfers and governance calls.
    Any other payload sent to it is refused, which makes the carrying
    invocation fail.

    Attributes:
        sender: Identity that made the call.
    """

    def __init__(self, sender: str) -> None:
        self.sender = sender
        super().__init__(f"Vault cannot handle the payload sent by {sender!r}")
