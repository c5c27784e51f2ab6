r"""Randomized delays."""

from __future__ import annotations

__all__ = ["random_between"]

import random
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryable.callbacks import CallArguments


def random_between(minimum: float, maximum: float) -> Callable[[Any, int, CallArguments], float]:
    """Create a delay function returning a random delay in a range.

    Each call draws a new value uniformly distributed in
    ``[minimum, maximum]``, rounded to the millisecond, independently of
    previous calls. Spreading the delays keeps independent callers from
    retrying in lockstep.

    Args:
        minimum: The smallest delay in seconds.
        maximum: The largest delay in seconds.

    Returns:
        A delay function usable as the ``delay`` option.

    Raises:
        ValueError: If a bound is negative or ``minimum > maximum``.

    Example:
        ```pycon
        >>> from aretryable.backoff import random_between
        >>> delay = random_between(0.1, 0.5)
        >>> 0.1 <= delay(ValueError(), 1, None) <= 0.5
        True

        ```
    """
    if minimum < 0:
        msg = f"minimum must be non-negative, got {minimum}"
        raise ValueError(msg)
    if minimum > maximum:
        msg = f"minimum must be <= maximum, got minimum={minimum} and maximum={maximum}"
        raise ValueError(msg)

    def delay(failure: Any, attempt: int, call: CallArguments) -> float:  # noqa: ARG001
        value = round(random.uniform(minimum, maximum), 3)  # noqa: S311
        return min(maximum, max(minimum, value))

    return delay
