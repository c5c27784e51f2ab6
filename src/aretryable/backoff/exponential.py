r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretryable.backoff.base import BaseBackoffStrategy, check_delays


class ExponentialBackoff(BaseBackoffStrategy):
    """Delay doubling after each failed attempt.

    The delay after attempt ``n`` is ``base_delay * 2 ** (n - 1)``,
    capped at ``max_delay`` when set.

    Args:
        base_delay: The delay after the first failed attempt, in seconds
            (default: 0.3).
        max_delay: Optional maximum delay in seconds.

    Example:
        ```pycon
        >>> from aretryable.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.25)
        >>> [backoff.calculate(attempt) for attempt in (1, 2, 3)]
        [0.25, 0.5, 1.0]
        >>> ExponentialBackoff(base_delay=1.0, max_delay=5.0).calculate(10)
        5.0

        ```
    """

    def __init__(self, base_delay: float = 0.3, max_delay: float | None = None) -> None:
        check_delays(base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * (2 ** (attempt - 1))
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
