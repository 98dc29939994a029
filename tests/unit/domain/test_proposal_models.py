"""Unit tests for Proposal, ProposalView and content hashing."""

import pytest

from quorum_vault.domain.models.proposal import (
    Proposal,
    ProposalView,
    compute_content_hash,
)
from quorum_vault.domain.primitives import ProposalDeletionError


class TestProposal:
    """Tests for the Proposal entity."""

    def test_defaults(self) -> None:
        """A new proposal is unexecuted, unconfirmed and a plain transfer."""
        proposal = Proposal(index=0, proposer="a", destination="d", amount=5)
        assert proposal.executed is False
        assert proposal.confirmation_count == 0
        assert proposal.payload == b""
        assert proposal.is_plain_transfer

    def test_zero_amount_allowed(self) -> None:
        """Zero-value proposals are valid."""
        proposal = Proposal(index=0, proposer="a", destination="d", amount=0)
        assert proposal.amount == 0

    def test_negative_amount_rejected(self) -> None:
        """Amounts are never negative."""
        with pytest.raises(ValueError, match="amount"):
            Proposal(index=0, proposer="a", destination="d", amount=-1)

    def test_negative_index_rejected(self) -> None:
        """Indices start at zero."""
        with pytest.raises(ValueError, match="index"):
            Proposal(index=-1, proposer="a", destination="d", amount=1)

    def test_payload_coerced_to_bytes(self) -> None:
        """bytearray payloads are stored as immutable bytes."""
        proposal = Proposal(
            index=0, proposer="a", destination="d", amount=1, payload=bytearray(b"x")
        )
        assert isinstance(proposal.payload, bytes)
        assert not proposal.is_plain_transfer

    def test_delete_prohibited(self) -> None:
        """Proposals can never be deleted."""
        proposal = Proposal(index=0, proposer="a", destination="d", amount=1)
        with pytest.raises(ProposalDeletionError):
            proposal.delete()

    def test_to_view_snapshots_state(self) -> None:
        """A view does not follow later changes to the proposal."""
        proposal = Proposal(index=3, proposer="a", destination="d", amount=7)
        view = proposal.to_view()
        proposal.confirmation_count = 2
        proposal.executed = True
        assert view == ProposalView(
            index=3,
            proposer="a",
            destination="d",
            amount=7,
            payload=b"",
            executed=False,
            confirmation_count=0,
        )

    def test_view_is_frozen(self) -> None:
        """Views cannot be modified."""
        view = Proposal(index=0, proposer="a", destination="d", amount=1).to_view()
        with pytest.raises(AttributeError):
            view.executed = True  # type: ignore[misc]


class TestContentHash:
    """Tests for compute_content_hash."""

    def test_hash_is_32_bytes(self) -> None:
        """BLAKE3 digests are 32 bytes."""
        assert len(compute_content_hash("d", 1, b"")) == 32

    def test_hash_is_deterministic(self) -> None:
        """The same content always hashes the same."""
        assert compute_content_hash("d", 1, b"x") == compute_content_hash("d", 1, b"x")

    def test_hash_covers_every_field(self) -> None:
        """Changing any field changes the hash."""
        base = compute_content_hash("d", 1, b"x")
        assert compute_content_hash("e", 1, b"x") != base
        assert compute_content_hash("d", 2, b"x") != base
        assert compute_content_hash("d", 1, b"y") != base

    def test_proposal_content_hash_matches(self) -> None:
        """Proposal.content_hash uses the same canonical form."""
        proposal = Proposal(index=0, proposer="a", destination="d", amount=1, payload=b"x")
        assert proposal.content_hash() == compute_content_hash("d", 1, b"x")
