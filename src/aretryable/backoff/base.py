r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretryable.callbacks import CallArguments


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy computes the pause before the next attempt from
    the number of the attempt that just failed. Instances are delay
    functions: they can be passed directly as the ``delay`` option.
    """

    def __call__(self, failure: Any, attempt: int, call: CallArguments) -> float:  # noqa: ARG002
        return self.calculate(attempt)

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay after a failed attempt.

        Args:
            attempt: The number of the attempt that just failed
                (1-indexed). attempt=1 is the delay before the first
                retry, attempt=2 before the second retry, etc.

        Returns:
            The delay in seconds before the next attempt.
        """


def check_delays(base_delay: float, max_delay: float | None) -> None:
    if base_delay < 0:
        msg = f"base_delay must be non-negative, got {base_delay}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)
