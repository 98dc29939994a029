"""Base exception classes for the Quorum Vault domain layer."""


class VaultError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    Every VaultError means the requested state transition did not happen
    and the vault is exactly as it was before the call.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)

    def to_dict(self) -> dict:
        """Describe the failure for observers and callers.

        Returns:
            Dictionary with the error name and message.
        """
        return {
            "error": type(self).__name__,
            "detail": str(self),
        }
