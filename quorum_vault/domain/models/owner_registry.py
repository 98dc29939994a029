"""Owner registry model.

The owner registry holds the set of identities allowed to act on the vault
and the number of confirmations a proposal needs before it can execute.

Invariants (hold after every successful operation):
- is_owner(a) is True exactly when a appears in owners
- owners contains no duplicates and never the null identity
- len(owners) >= MIN_OWNERS
- MIN_CONFIRMATIONS <= required_confirmations <= len(owners)

Owner order follows insertion, except that removal swaps the last owner
into the vacated slot. Callers must not rely on positions after a removal.
"""

from __future__ import annotations

from collections.abc import Sequence

from quorum_vault.domain.errors.owner_registry import (
    DuplicateOwnerError,
    InvalidConfigurationError,
    InvalidOwnerError,
    InvalidThresholdError,
    QuorumFloorViolationError,
    UnknownOwnerError,
)
from quorum_vault.domain.primitives.quorum_limits import (
    MIN_OWNERS,
    is_null_identity,
    threshold_bounds,
)


def _validate_threshold(required_confirmations: int, owner_count: int) -> None:
    minimum, maximum = threshold_bounds(owner_count)
    if not minimum <= required_confirmations <= maximum:
        raise InvalidThresholdError(
            requested=required_confirmations,
            minimum=minimum,
            maximum=maximum,
        )


class OwnerRegistry:
    """Owner set and confirmation threshold of a single vault.

    Mutating methods validate everything before touching state, so a
    rejected call leaves the registry untouched.

    Example:
        >>> registry = OwnerRegistry(["alice", "bob", "carol"], 2)
        >>> registry.is_owner("bob")
        True
        >>> registry.add("dave")
        >>> registry.owners
        ('alice', 'bob', 'carol', 'dave')
    """

    def __init__(self, owners: Sequence[str], required_confirmations: int) -> None:
        """Create a registry from an initial owner list and threshold.

        Args:
            owners: Initial owners, in order.
            required_confirmations: Confirmations a proposal needs.

        Raises:
            InvalidConfigurationError: Fewer than MIN_OWNERS owners.
            InvalidThresholdError: Threshold outside [MIN_CONFIRMATIONS, len(owners)].
            InvalidOwnerError: An owner is the null identity.
            DuplicateOwnerError: An owner appears more than once.
        """
        owner_list = list(owners)
        if len(owner_list) < MIN_OWNERS:
            raise InvalidConfigurationError(len(owner_list), MIN_OWNERS)
        _validate_threshold(required_confirmations, len(owner_list))

        members: set[str] = set()
        for owner in owner_list:
            if is_null_identity(owner):
                raise InvalidOwnerError(owner)
            if owner in members:
                raise DuplicateOwnerError(owner)
            members.add(owner)

        self._owners: list[str] = owner_list
        self._members: set[str] = members
        self._required_confirmations: int = required_confirmations

    @property
    def owners(self) -> tuple[str, ...]:
        """Owners in their current enumeration order."""
        return tuple(self._owners)

    @property
    def owner_count(self) -> int:
        return len(self._owners)

    @property
    def required_confirmations(self) -> int:
        return self._required_confirmations

    def is_owner(self, identity: str) -> bool:
        """Check whether an identity is a current owner."""
        return identity in self._members

    def add(self, owner: str) -> None:
        """Append a new owner.

        The threshold is left as it is; adding owners never raises it.

        Args:
            owner: Identity to add.

        Raises:
            InvalidOwnerError: owner is the null identity.
            DuplicateOwnerError: owner is already registered.
        """
        if is_null_identity(owner):
            raise InvalidOwnerError(owner)
        if owner in self._members:
            raise DuplicateOwnerError(owner)
        self._owners.append(owner)
        self._members.add(owner)

    def remove(self, owner: str) -> int | None:
        """Remove an owner with swap-with-last-and-shrink.

        If the threshold is at or above the new owner count it is pinned
        to that count and reported as a clamp, so observers learn that the
        vault now needs every remaining owner.

        Args:
            owner: Identity to remove.

        Returns:
            The threshold before the removal if it was clamped, otherwise None.

        Raises:
            UnknownOwnerError: owner is not registered.
            QuorumFloorViolationError: the owner set is already at MIN_OWNERS.
        """
        if owner not in self._members:
            raise UnknownOwnerError(owner)
        if len(self._owners) - 1 < MIN_OWNERS:
            raise QuorumFloorViolationError(owner, len(self._owners), MIN_OWNERS)

        position = self._owners.index(owner)
        self._owners[position] = self._owners[-1]
        self._owners.pop()
        self._members.discard(owner)

        if self._required_confirmations >= len(self._owners):
            previous = self._required_confirmations
            self._required_confirmations = len(self._owners)
            return previous
        return None

    def set_threshold(self, required_confirmations: int) -> int:
        """Change the confirmation threshold.

        Args:
            required_confirmations: New threshold.

        Returns:
            The previous threshold.

        Raises:
            InvalidThresholdError: value outside [MIN_CONFIRMATIONS, len(owners)].
        """
        _validate_threshold(required_confirmations, len(self._owners))
        previous = self._required_confirmations
        self._required_confirmations = required_confirmations
        return previous

    def __repr__(self) -> str:
        return (
            f"OwnerRegistry(owners={self._owners!r}, "
            f"required_confirmations={self._required_confirmations})"
        )
