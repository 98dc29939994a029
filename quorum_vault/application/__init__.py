"""Application layer for Quorum Vault.

Services orchestrate domain models and talk to the outside world only
through the ports defined in `ports`.
"""
