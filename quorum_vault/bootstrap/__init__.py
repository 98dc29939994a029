"""Bootstrap wiring for Quorum Vault."""

from quorum_vault.bootstrap.vault import create_vault, load_vault_config

__all__: list[str] = ["create_vault", "load_vault_config"]
