"""Configuration for Quorum Vault."""

from quorum_vault.config.vault_config import VaultConfig

__all__: list[str] = ["VaultConfig"]
