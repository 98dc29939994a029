"""Test helpers for Quorum Vault."""

from tests.helpers.vault_identities import (
    ALICE,
    BOB,
    CAROL,
    DAVE,
    EVE,
    RECIPIENT,
    VAULT,
)

__all__ = ["ALICE", "BOB", "CAROL", "DAVE", "EVE", "RECIPIENT", "VAULT"]
