"""Unit tests for the vault error hierarchy."""

import pytest

from quorum_vault.domain.errors import (
    AlreadyConfirmedError,
    AlreadyExecutedError,
    AuthorizationError,
    DuplicateOwnerError,
    ExecutionError,
    InvalidConfigurationError,
    InvalidOwnerError,
    InvalidThresholdError,
    InvocationFailedError,
    NotConfirmedError,
    OwnerRegistryError,
    ProposalError,
    QuorumFloorViolationError,
    QuorumNotMetError,
    UnauthorizedError,
    UnknownOwnerError,
    UnknownProposalError,
    UnsupportedCallError,
)
from quorum_vault.domain.exceptions import VaultError


class TestErrorHierarchy:
    """Every error belongs to exactly one family under VaultError."""

    @pytest.mark.parametrize(
        ("error", "family"),
        [
            (UnauthorizedError("x", "propose"), AuthorizationError),
            (InvalidConfigurationError(2, 3), OwnerRegistryError),
            (InvalidThresholdError(1, 2, 3), OwnerRegistryError),
            (InvalidOwnerError(None), OwnerRegistryError),
            (DuplicateOwnerError("x"), OwnerRegistryError),
            (UnknownOwnerError("x"), OwnerRegistryError),
            (QuorumFloorViolationError("x", 3, 3), OwnerRegistryError),
            (UnknownProposalError(4, 1), ProposalError),
            (AlreadyExecutedError(0), ProposalError),
            (AlreadyConfirmedError(0, "x"), ProposalError),
            (NotConfirmedError(0, "x"), ProposalError),
            (QuorumNotMetError(0, 1, 2), ProposalError),
            (InvocationFailedError(0, "d"), ExecutionError),
            (UnsupportedCallError("x"), ExecutionError),
        ],
    )
    def test_family(self, error: VaultError, family: type[VaultError]) -> None:
        """Errors inherit from their family and from VaultError."""
        assert isinstance(error, family)
        assert isinstance(error, VaultError)


class TestErrorContext:
    """Errors carry their context as attributes and in to_dict()."""

    def test_base_to_dict(self) -> None:
        """to_dict names the error and its message."""
        error = DuplicateOwnerError("0xbob")
        assert error.to_dict() == {
            "error": "DuplicateOwnerError",
            "detail": "Owner '0xbob' is already registered",
        }

    def test_unauthorized_to_dict(self) -> None:
        """Caller and operation are included."""
        data = UnauthorizedError("0xeve", "execute").to_dict()
        assert data["caller"] == "0xeve"
        assert data["operation"] == "execute"

    def test_quorum_not_met_to_dict(self) -> None:
        """Confirmation counts are included."""
        data = QuorumNotMetError(3, 1, 2).to_dict()
        assert data["proposal_index"] == 3
        assert data["confirmations"] == 1
        assert data["required"] == 2

    def test_invocation_failed_message_includes_reason(self) -> None:
        """The ledger reason is appended to the message."""
        error = InvocationFailedError(0, "0xdest", "insufficient_balance")
        assert "insufficient_balance" in str(error)
        assert error.to_dict()["reason"] == "insufficient_balance"

    def test_invocation_failed_without_reason(self) -> None:
        """A missing reason leaves the message plain."""
        error = InvocationFailedError(0, "0xdest")
        assert str(error).endswith("failed")
        assert error.reason is None
