"""Domain layer for Quorum Vault.

Pure state, rules and errors. Nothing in this package performs I/O;
ledger access and notification delivery live behind application ports.
"""
