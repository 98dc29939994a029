"""Vault runtime configuration.

Environment variable overrides for the parts of a vault deployment that
are operational rather than part of the trust model. Quorum floors
(MIN_OWNERS, MIN_CONFIRMATIONS) are constants and cannot be configured.

Environment Variables:
- VAULT_ADDRESS: Identity of the vault on the ledger (required)
- VAULT_ENVIRONMENT: 'production' (JSON logs) or 'development' (console logs)
- VAULT_OWNERS: Comma-separated initial owners (optional)
- VAULT_REQUIRED_CONFIRMATIONS: Initial threshold (default: 2)
- LOG_LEVEL: Log level name (read by the logging configuration)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from quorum_vault.domain.primitives import MIN_CONFIRMATIONS, is_null_identity

VALID_ENVIRONMENTS = frozenset({"production", "development"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_list_env(key: str) -> tuple[str, ...]:
    value = os.environ.get(key, "")
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class VaultConfig:
    """Configuration for a vault deployment.

    Owner and threshold values here only seed construction; the vault
    itself still validates them, and afterwards they change only through
    executed proposals.

    Attributes:
        vault_address: Identity of the vault on the ledger.
        environment: Logging mode, 'production' or 'development'.
        owners: Initial owners (may be empty when supplied in code).
        required_confirmations: Initial threshold.
    """

    vault_address: str
    environment: str = "production"
    owners: tuple[str, ...] = field(default_factory=tuple)
    required_confirmations: int = MIN_CONFIRMATIONS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if is_null_identity(self.vault_address):
            raise ValueError("vault_address must be set to a non-null identity")
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.required_confirmations < MIN_CONFIRMATIONS:
            raise ValueError(
                f"required_confirmations must be at least {MIN_CONFIRMATIONS}, "
                f"got {self.required_confirmations}"
            )

    @classmethod
    def from_environment(cls) -> "VaultConfig":
        """Create config from environment variables with defaults.

        Raises:
            ValueError: VAULT_ADDRESS is missing or a value is invalid.
        """
        return cls(
            vault_address=os.environ.get("VAULT_ADDRESS", ""),
            environment=os.environ.get("VAULT_ENVIRONMENT", "production"),
            owners=_get_list_env("VAULT_OWNERS"),
            required_confirmations=_get_int_env(
                "VAULT_REQUIRED_CONFIRMATIONS", MIN_CONFIRMATIONS
            ),
        )
