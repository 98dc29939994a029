"""Authorization errors for Quorum Vault.

Callers are identified by the execution substrate, never by an argument
they control. These errors reject callers that are not allowed to perform
the requested operation.
"""

from __future__ import annotations

from quorum_vault.domain.exceptions import VaultError


class AuthorizationError(VaultError):
    """Base class for caller authorization failures."""

    pass


class UnauthorizedError(AuthorizationError):
    """Raised when the caller may not perform the requested operation.

    Two situations produce this error:
    - A non-owner tries to propose, confirm, revoke or execute.
    - Anyone other than the vault itself (during execution of an approved
      proposal) tries to add an owner, remove an owner or change the
      threshold.

    Attributes:
        caller: Identity that attempted the operation.
        operation: Name of the rejected operation.
    """

    def __init__(self, caller: str, operation: str) -> None:
        self.caller = caller
        self.operation = operation
        super().__init__(f"Caller {caller!r} is not authorized to {operation}")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["caller"] = self.caller
        result["operation"] = self.operation
        return result
