r"""Callback manager for failed-attempt notifications.

This module provides the CallbackManager class that invokes the user
defined ``on_error`` callback without letting it influence the retry
decision.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryable.callbacks import CallArguments

logger: logging.Logger = logging.getLogger(__name__)


class CallbackManager:
    """Manages ``on_error`` invocations during the retry lifecycle.

    Synchronous callbacks are called inline and their return value is
    ignored. When the callback returns an awaitable (for example an
    ``async def`` callback), it is scheduled as a background task and
    is not awaited by the retry loop. The manager keeps a reference to
    each pending task until it completes, and logs the exception of a
    task that failed.

    Args:
        on_error: Optional callback called with ``(failure, attempt, call)``.

    Attributes:
        on_error: The callback, or ``None``.
        pending: The background tasks that have not completed yet.
    """

    def __init__(self, on_error: Callable[[Any, int, CallArguments], Any] | None = None) -> None:
        self.on_error = on_error
        self.pending: set[asyncio.Future[Any]] = set()

    def notify(self, failure: Any, attempt: int, call: CallArguments) -> None:
        """Invoke ``on_error`` for a failed attempt.

        Exceptions raised by a synchronous callback propagate to the
        caller.

        Args:
            failure: The exception or flagged value of the failed attempt.
            attempt: The number of the failed attempt (1-indexed).
            call: The arguments of the original call.
        """
        if self.on_error is None:
            return
        outcome = self.on_error(failure, attempt, call)
        if inspect.isawaitable(outcome):
            task = asyncio.ensure_future(outcome)
            self.pending.add(task)
            task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Future[Any]) -> None:
        self.pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("on_error callback raised an exception", exc_info=exc)
