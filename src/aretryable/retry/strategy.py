r"""Retry strategy for computing and waiting out inter-attempt delays.

This module provides the RetryStrategy class, which turns the ``delay``
option into a single delay function when the retry executor is built.
"""

from __future__ import annotations

__all__ = ["RetryStrategy", "build_delay_function"]

import asyncio
import logging
import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryable.callbacks import CallArguments

    DelayFunction = Callable[[Any, int, CallArguments], float]

logger: logging.Logger = logging.getLogger(__name__)


def build_delay_function(delay: float | DelayFunction | None) -> DelayFunction | None:
    """Normalize the ``delay`` option into a delay function.

    Args:
        delay: ``None``, a fixed number of seconds, or a delay function.

    Returns:
        ``None`` when no delay is configured, otherwise a function
        returning the number of seconds for ``(failure, attempt, call)``.

    Example:
        ```pycon
        >>> from aretryable.retry.strategy import build_delay_function
        >>> build_delay_function(None) is None
        True
        >>> build_delay_function(0.5)(ValueError(), 1, None)
        0.5

        ```
    """
    if delay is None:
        return None
    if callable(delay):
        return delay
    seconds = float(delay)

    def fixed_delay(failure: Any, attempt: int, call: CallArguments) -> float:  # noqa: ARG001
        return seconds

    return fixed_delay


class RetryStrategy:
    """Strategy for calculating and waiting the delay between attempts.

    Args:
        delay: ``None``, a fixed number of seconds, or a delay function
            called with ``(failure, attempt, call)``.

    Attributes:
        delay_function: The normalized delay function, or ``None`` if
            attempts follow each other without suspension.
    """

    def __init__(self, delay: float | DelayFunction | None = None) -> None:
        self.delay_function = build_delay_function(delay)

    def calculate_delay(self, failure: Any, attempt: int, call: CallArguments) -> float:
        """Calculate the delay before the next attempt.

        Negative values returned by a delay function are clamped to 0.

        Args:
            failure: The exception or flagged value of the failed attempt.
            attempt: The number of the failed attempt (1-indexed).
            call: The arguments of the original call.

        Returns:
            The delay in seconds.

        Raises:
            ValueError: if the delay function returns a non-finite value.
        """
        if self.delay_function is None:
            return 0.0
        delay = float(self.delay_function(failure, attempt, call))
        if not math.isfinite(delay):
            msg = f"delay function must return a finite number, got {delay}"
            raise ValueError(msg)
        return max(0.0, delay)

    async def wait(self, failure: Any, attempt: int, call: CallArguments) -> None:
        """Wait before the next attempt.

        Nothing is awaited when no delay is configured.

        Args:
            failure: The exception or flagged value of the failed attempt.
            attempt: The number of the failed attempt (1-indexed).
            call: The arguments of the original call.
        """
        if self.delay_function is None:
            return
        sleep_time = self.calculate_delay(failure, attempt, call)
        logger.debug(f"Waiting {sleep_time:.2f}s before attempt {attempt + 1}")
        await asyncio.sleep(sleep_time)
