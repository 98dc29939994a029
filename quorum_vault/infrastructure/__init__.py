"""Infrastructure layer for Quorum Vault: adapters and observability."""
