"""Unit tests for the VaultState aggregate."""

import pytest

from quorum_vault.domain.errors import UnknownProposalError
from quorum_vault.domain.events import ProposalConfirmedEvent
from quorum_vault.domain.models.owner_registry import OwnerRegistry
from quorum_vault.domain.models.proposal import Proposal
from quorum_vault.domain.models.vault_state import VaultState


@pytest.fixture
def state() -> VaultState:
    """State with one proposal recorded."""
    state = VaultState(registry=OwnerRegistry(["a", "b", "c"], 2))
    state.append_proposal(Proposal(index=0, proposer="a", destination="d", amount=1))
    return state


class TestVaultStateProposals:
    """Tests for proposal storage."""

    def test_append_assigns_empty_confirmations(self, state: VaultState) -> None:
        """A new proposal starts with no confirmations."""
        assert state.proposal_count == 1
        assert state.confirmed_by(0) == frozenset()

    def test_append_out_of_order_rejected(self, state: VaultState) -> None:
        """Indices must be dense."""
        with pytest.raises(ValueError):
            state.append_proposal(
                Proposal(index=5, proposer="a", destination="d", amount=1)
            )

    @pytest.mark.parametrize("index", [-1, 1, 100])
    def test_get_unknown_proposal(self, state: VaultState, index: int) -> None:
        """Out-of-range indices raise UnknownProposalError."""
        with pytest.raises(UnknownProposalError) as exc_info:
            state.get_proposal(index)
        assert exc_info.value.index == index
        assert exc_info.value.proposal_count == 1


class TestVaultStateConfirmations:
    """Tests for the confirmation relation."""

    def test_set_and_clear_keep_count_in_sync(self, state: VaultState) -> None:
        """confirmation_count always equals the number of set flags."""
        assert state.set_confirmation(0, "a") == 1
        assert state.set_confirmation(0, "b") == 2
        assert state.clear_confirmation(0, "a") == 1
        assert state.confirmed_by(0) == frozenset({"b"})
        assert state.get_proposal(0).confirmation_count == 1

    def test_is_confirmed(self, state: VaultState) -> None:
        """is_confirmed reflects the flag."""
        state.set_confirmation(0, "a")
        assert state.is_confirmed(0, "a")
        assert not state.is_confirmed(0, "b")


class TestVaultStateOutbox:
    """Tests for the notification outbox."""

    def test_drain_returns_in_order_and_empties(self, state: VaultState) -> None:
        """drain_outbox returns oldest first and leaves the outbox empty."""
        first = ProposalConfirmedEvent(index=0, owner="a", confirmation_count=1)
        second = ProposalConfirmedEvent(index=0, owner="b", confirmation_count=2)
        state.record(first)
        state.record(second)
        assert state.drain_outbox() == [first, second]
        assert state.outbox == []


class TestVaultStateCheckpoint:
    """Tests for checkpoint() and restore()."""

    def test_restore_discards_every_change(self, state: VaultState) -> None:
        """Restoring reverts registry, proposals, confirmations and outbox."""
        checkpoint = state.checkpoint()

        state.get_proposal(0).executed = True
        state.set_confirmation(0, "a")
        state.registry.add("d")
        state.append_proposal(Proposal(index=1, proposer="a", destination="d", amount=2))
        state.record(ProposalConfirmedEvent(index=0, owner="a", confirmation_count=1))

        state.restore(checkpoint)

        assert state.proposal_count == 1
        assert state.get_proposal(0).executed is False
        assert state.get_proposal(0).confirmation_count == 0
        assert state.confirmed_by(0) == frozenset()
        assert state.registry.owners == ("a", "b", "c")
        assert state.outbox == []

    def test_checkpoint_is_independent(self, state: VaultState) -> None:
        """Changes after a checkpoint do not leak into it."""
        checkpoint = state.checkpoint()
        state.set_confirmation(0, "a")
        assert checkpoint.get_proposal(0).confirmation_count == 0
        assert not checkpoint.is_confirmed(0, "a")
