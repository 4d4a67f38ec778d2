"""Cooperative cancellation for handler invocations.

A ``CancellationToken`` is handed to ``Dispatcher.send`` alongside the
request. Handlers check it before each repository call and run the call
through ``CancellationToken.run``, which abandons the in-flight call as
soon as the token fires.

Native task cancellation (``asyncio.CancelledError``) is separate: it is
never caught by handlers and propagates to the caller.

Usage:
    token = CancellationToken()
    response_task = asyncio.create_task(dispatcher.send(query, token))
    token.cancel()  # handler returns a CANCELLED failure envelope
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")

CANCELLED_MESSAGE = "Request was cancelled"


class OperationCancelledError(Exception):
    """Raised inside a handler when its cancellation token has fired."""

    def __init__(self, message: str = CANCELLED_MESSAGE) -> None:
        super().__init__(message)


class CancellationToken:
    """Signal shared between a caller and a running handler.

    Once cancelled, a token stays cancelled.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self._event.set()

    def raise_if_cancelled(self) -> None:
        """Raise if cancellation has been requested.

        Raises:
            OperationCancelledError: If the token has fired.
        """
        if self._event.is_set():
            raise OperationCancelledError()

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` unless the token fires first.

        When the token fires before ``awaitable`` finishes, the in-flight
        task is cancelled and its outcome discarded.

        Args:
            awaitable: Coroutine or future to run (typically a repository call).

        Returns:
            Result of ``awaitable``.

        Raises:
            OperationCancelledError: If the token fired before completion.
        """
        if self.is_cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise OperationCancelledError()

        task: asyncio.Future[T] = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            task.cancel()
            waiter.cancel()
            raise

        waiter.cancel()
        if self.is_cancelled:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            raise OperationCancelledError()
        return task.result()
