"""Unit tests for vault primitives.

- AtomicOperationContext: rollback handlers run LIFO and the error re-raises
- DeletePreventionMixin: deletion always raises
- Quorum limits: floors and null identity detection

All tests are pure unit tests with NO infrastructure dependencies.
"""

import pytest

from quorum_vault.domain.exceptions import VaultError
from quorum_vault.domain.primitives import (
    MIN_CONFIRMATIONS,
    MIN_OWNERS,
    ZERO_ADDRESS,
    AtomicOperationContext,
    DeletePreventionMixin,
    ProposalDeletionError,
    is_null_identity,
    threshold_bounds,
)


class SampleEntity(DeletePreventionMixin):
    """Sample entity for DeletePreventionMixin tests."""

    def __init__(self, name: str = "test") -> None:
        self.name = name


class TestDeletePreventionMixin:
    """Tests for DeletePreventionMixin."""

    def test_delete_raises(self) -> None:
        """Calling delete() should raise ProposalDeletionError."""
        with pytest.raises(ProposalDeletionError):
            SampleEntity().delete()

    def test_error_is_vault_error(self) -> None:
        """Deletion errors belong to the vault error hierarchy."""
        with pytest.raises(VaultError) as exc_info:
            SampleEntity().delete()
        assert "Deletion prohibited" in str(exc_info.value)

    def test_mixin_does_not_affect_other_attributes(self) -> None:
        """Mixin should not affect other entity attributes."""
        assert SampleEntity(name="kept").name == "kept"


class TestAtomicOperationContext:
    """Tests for AtomicOperationContext."""

    @pytest.mark.asyncio
    async def test_success_runs_no_rollback(self) -> None:
        """Rollback handlers are not called on success."""
        calls: list[str] = []
        async with AtomicOperationContext() as ctx:
            ctx.add_rollback(lambda: calls.append("rollback"))
        assert calls == []

    @pytest.mark.asyncio
    async def test_failure_runs_rollbacks_lifo_and_reraises(self) -> None:
        """Handlers run last-in-first-out, then the error propagates."""
        calls: list[str] = []
        with pytest.raises(ValueError, match="boom"):
            async with AtomicOperationContext(operation="test") as ctx:
                ctx.add_rollback(lambda: calls.append("first"))
                ctx.add_rollback(lambda: calls.append("second"))
                raise ValueError("boom")
        assert calls == ["second", "first"]

    @pytest.mark.asyncio
    async def test_async_rollback_awaited(self) -> None:
        """Coroutine handlers are awaited."""
        calls: list[str] = []

        async def undo() -> None:
            calls.append("async")

        with pytest.raises(RuntimeError):
            async with AtomicOperationContext() as ctx:
                ctx.add_rollback(undo)
                raise RuntimeError("fail")
        assert calls == ["async"]

    @pytest.mark.asyncio
    async def test_failing_rollback_does_not_stop_others(self) -> None:
        """A failing handler is logged and the rest still run."""
        calls: list[str] = []

        def broken() -> None:
            raise OSError("cannot undo")

        with pytest.raises(ValueError):
            async with AtomicOperationContext() as ctx:
                ctx.add_rollback(lambda: calls.append("first"))
                ctx.add_rollback(broken)
                raise ValueError("original")
        assert calls == ["first"]

    def test_rollback_count(self) -> None:
        """rollback_count reports registered handlers."""
        ctx = AtomicOperationContext()
        ctx.add_rollback(lambda: None)
        ctx.add_rollback(lambda: None)
        assert ctx.rollback_count == 2


class TestQuorumLimits:
    """Tests for the quorum floors and null identity."""

    def test_floors(self) -> None:
        """Three owners and two confirmations are the minimums."""
        assert MIN_OWNERS == 3
        assert MIN_CONFIRMATIONS == 2

    @pytest.mark.parametrize(
        "identity", [None, "", "   ", ZERO_ADDRESS, f" {ZERO_ADDRESS} "]
    )
    def test_null_identities(self, identity: str | None) -> None:
        """None, blank strings and the zero address are null."""
        assert is_null_identity(identity)

    def test_regular_identity_is_not_null(self) -> None:
        """Ordinary addresses are not null."""
        assert not is_null_identity("0x" + "1" * 40)

    def test_threshold_bounds(self) -> None:
        """Bounds run from the floor to the owner count."""
        assert threshold_bounds(5) == (2, 5)
