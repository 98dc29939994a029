"""Vault primitive: Ensure atomic operations.

This module provides an async context manager that ensures atomic operations
with rollback capability. If an exception occurs within the context, all
registered rollback handlers are executed before the exception is re-raised.

Every vault operation either fully commits or fully reverts. Execution is the
one place where control leaves the vault (the ledger invocation), so it wraps
its work in this context and registers a checkpoint restore as its rollback.

Usage:
    async with AtomicOperationContext(operation="execute") as ctx:
        checkpoint = state.checkpoint()
        ctx.add_rollback(lambda: state.restore(checkpoint))
        await do_operation()
        # On exception: state restored, exception re-raised
"""

import inspect
from collections.abc import Callable, Coroutine
from types import TracebackType
from typing import Any

import structlog

log = structlog.get_logger()

# Type alias for rollback handlers - can be sync or async
RollbackHandler = Callable[[], None] | Callable[[], Coroutine[Any, Any, None]]


class AtomicOperationContext:
    """Context manager ensuring atomic operations with rollback.

    Rollback handlers are called in reverse order (LIFO) if an exception
    occurs. After all rollback handlers have been executed, the original
    exception is re-raised.

    Supports both synchronous and asynchronous rollback handlers.

    Example:
        >>> async def example():
        ...     async with AtomicOperationContext() as ctx:
        ...         ctx.add_rollback(lambda: print("Rolling back"))
        ...         raise ValueError("Something went wrong")
        # Output: Rolling back
        # Then ValueError is re-raised

    Attributes:
        operation: Label used in log entries.
        _rollback_handlers: List of registered rollback handlers (LIFO order)
    """

    def __init__(self, operation: str = "atomic_operation") -> None:
        """Initialize the atomic operation context.

        Args:
            operation: Label used in log entries for this operation.
        """
        self.operation = operation
        self._rollback_handlers: list[RollbackHandler] = []

    def add_rollback(self, handler: RollbackHandler) -> None:
        """Register a rollback handler to be called on failure.

        Handlers are called in reverse order (LIFO) - the last handler
        added is the first to be called during rollback.

        Args:
            handler: A callable (sync or async) that performs cleanup.
                     Must take no arguments.
        """
        self._rollback_handlers.append(handler)

    @property
    def rollback_count(self) -> int:
        """Number of registered rollback handlers."""
        return len(self._rollback_handlers)

    async def __aenter__(self) -> "AtomicOperationContext":
        """Enter the async context.

        Returns:
            Self, to allow adding rollback handlers.
        """
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        """Exit the async context, executing rollbacks on exception.

        Any exceptions from rollback handlers are logged but do not
        prevent other rollback handlers from running.

        Args:
            exc_type: The exception type, if an exception was raised.
            exc_val: The exception instance, if an exception was raised.
            exc_tb: The traceback, if an exception was raised.

        Returns:
            False - always re-raises the original exception if one occurred.
        """
        if exc_val is None:
            return False

        log.info(
            "atomic_operation_failed",
            operation=self.operation,
            error=str(exc_val),
            error_type=exc_type.__name__ if exc_type else "Unknown",
            rollback_count=len(self._rollback_handlers),
        )

        for handler in reversed(self._rollback_handlers):
            try:
                if inspect.iscoroutinefunction(handler):
                    await handler()
                else:
                    result = handler()
                    # Handle case where sync function returns a coroutine
                    if inspect.iscoroutine(result):
                        await result
            except Exception as rollback_error:
                log.error(
                    "rollback_handler_failed",
                    operation=self.operation,
                    rollback_error=str(rollback_error),
                    rollback_error_type=type(rollback_error).__name__,
                )

        return False
