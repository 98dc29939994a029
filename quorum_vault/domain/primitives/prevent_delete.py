"""Vault primitive: Prevent deletion of domain entities.

Proposals are append-only: once recorded they keep their index forever,
executed or not. Any attempt to delete one raises instead of silently
doing nothing.

Usage:
    class Proposal(DeletePreventionMixin):
        ...

    proposal.delete()  # Raises ProposalDeletionError
"""

from quorum_vault.domain.exceptions import VaultError


class ProposalDeletionError(VaultError):
    """Raised when something tries to delete an append-only entity."""

    pass


class DeletePreventionMixin:
    """Mixin that prevents deletion of domain entities.

    Provides a `delete()` method that always raises, making the forbidden
    operation visible rather than silent.

    Example:
        >>> class Record(DeletePreventionMixin):
        ...     pass
        >>> Record().delete()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        ProposalDeletionError: Deletion prohibited...
    """

    def delete(self) -> None:
        """Raise ProposalDeletionError - deletion is prohibited.

        Raises:
            ProposalDeletionError: Always raised.
        """
        raise ProposalDeletionError(
            "Deletion prohibited - proposals are append-only and never removed"
        )
