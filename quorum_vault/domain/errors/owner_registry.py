"""Owner registry errors for Quorum Vault.

These errors protect the owner set and the quorum threshold:

- The owner set never has fewer than MIN_OWNERS members
- The owner set never contains duplicates or the null identity
- MIN_CONFIRMATIONS <= required_confirmations <= number of owners
"""

from __future__ import annotations

from quorum_vault.domain.exceptions import VaultError


class OwnerRegistryError(VaultError):
    """Base class for owner set and threshold violations."""

    pass


class InvalidConfigurationError(OwnerRegistryError):
    """Raised when a vault is constructed with too few owners.

    Attributes:
        owner_count: Number of owners supplied.
        minimum: The owner floor.
    """

    def __init__(self, owner_count: int, minimum: int) -> None:
        self.owner_count = owner_count
        self.minimum = minimum
        super().__init__(
            f"A vault needs at least {minimum} owners, got {owner_count}"
        )


class InvalidThresholdError(OwnerRegistryError):
    """Raised when a confirmation threshold is outside its allowed range.

    Attributes:
        requested: The threshold that was requested.
        minimum: Lowest allowed threshold.
        maximum: Highest allowed threshold (current owner count).
    """

    def __init__(self, requested: int, minimum: int, maximum: int) -> None:
        self.requested = requested
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Required confirmations must be between {minimum} and {maximum}, "
            f"got {requested}"
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update(
            requested=self.requested,
            minimum=self.minimum,
            maximum=self.maximum,
        )
        return result


class InvalidOwnerError(OwnerRegistryError):
    """Raised when the null identity is offered as an owner.

    Attributes:
        owner: The rejected identity.
    """

    def __init__(self, owner: str | None) -> None:
        self.owner = owner
        super().__init__(f"Invalid owner identity: {owner!r}")


class DuplicateOwnerError(OwnerRegistryError):
    """Raised when an identity is already an owner.

    Attributes:
        owner: The duplicated identity.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner
        super().__init__(f"Owner {owner!r} is already registered")


class UnknownOwnerError(OwnerRegistryError):
    """Raised when removing an identity that is not an owner.

    Attributes:
        owner: The identity that was not found.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner
        super().__init__(f"Owner {owner!r} is not registered")


class QuorumFloorViolationError(OwnerRegistryError):
    """Raised when removing an owner would breach the owner floor.

    Attributes:
        owner: The owner whose removal was refused.
        owner_count: Owner count before the attempted removal.
        minimum: The owner floor.
    """

    def __init__(self, owner: str, owner_count: int, minimum: int) -> None:
        self.owner = owner
        self.owner_count = owner_count
        self.minimum = minimum
        super().__init__(
            f"Cannot remove {owner!r}: the vault has {owner_count} owners "
            f"and may not drop below {minimum}"
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update(
            owner=self.owner,
            owner_count=self.owner_count,
            minimum=self.minimum,
        )
        return result
