"""Vault primitive: quorum floors and the null identity.

These values are part of the trust model and are deliberately not
configurable. A vault with fewer owners or a lower threshold would let
a single compromised key move funds.
"""

from __future__ import annotations

MIN_OWNERS: int = 3
"""Smallest owner set a vault may ever have."""

MIN_CONFIRMATIONS: int = 2
"""Smallest confirmation threshold a vault may ever have."""

ZERO_ADDRESS: str = "0x" + "0" * 40
"""The null identity. Never a valid owner."""


def is_null_identity(identity: str | None) -> bool:
    """Check whether an identity is the null/zero identity.

    Empty strings, None and any spelling of the all-zero address
    count as null.

    Args:
        identity: The identity to check.

    Returns:
        True if the identity is null.
    """
    if identity is None:
        return True
    stripped = identity.strip()
    if not stripped:
        return True
    return stripped.lower() == ZERO_ADDRESS


def threshold_bounds(owner_count: int) -> tuple[int, int]:
    """Allowed (minimum, maximum) threshold for an owner set of a given size."""
    return MIN_CONFIRMATIONS, owner_count
