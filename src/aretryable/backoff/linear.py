r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from aretryable.backoff.base import BaseBackoffStrategy, check_delays


class LinearBackoff(BaseBackoffStrategy):
    """Delay growing by ``base_delay`` after each failed attempt.

    The delay after attempt ``n`` is ``base_delay * n``, capped at
    ``max_delay`` when set.

    Args:
        base_delay: The delay step in seconds (default: 1.0).
        max_delay: Optional maximum delay in seconds.

    Example:
        ```pycon
        >>> from aretryable.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=0.5)
        >>> [backoff.calculate(attempt) for attempt in (1, 2, 3)]
        [0.5, 1.0, 1.5]
        >>> LinearBackoff(base_delay=2.0, max_delay=5.0).calculate(6)
        5.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        check_delays(base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * attempt
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
