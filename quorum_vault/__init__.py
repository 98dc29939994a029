"""
Quorum Vault - M-of-N guarded action engine

A fixed set of co-owners jointly approve and release value transfers
and arbitrary invocations. Nothing moves until a quorum of independent
confirmations is reached, and the owner set and threshold can only be
changed through that same approval pipeline.

Vault Truths:
- One owner, one vote
- Executed proposals never run twice
- A failed execution leaves no trace
- Governance has no privileged bypass
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
