r"""Configuration dataclass and defaults for retryable operations.

This module provides the immutable configuration object shared by every
invocation of a wrapped operation, and the constants used as defaults.
"""

from __future__ import annotations

__all__ = ["DEFAULT_MAX_RETRIES", "RetryConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretryable.core.validation import (
    validate_delay,
    validate_max_retries,
    validate_on_error,
    validate_retry_on,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretryable.callbacks import CallArguments

    Predicate = Callable[[Any, int, CallArguments], bool]
    DelayFunction = Callable[[Any, int, CallArguments], float]


# Default total number of attempts
# The first invocation counts as attempt 1, so 3 means up to 2 retries
DEFAULT_MAX_RETRIES = 3


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for the retry behavior of a wrapped operation.

    The configuration is built once per wrapped operation and is only
    read afterwards, so it can be shared by concurrent invocations.

    Args:
        max_retries: Total number of attempts allowed, the first
            invocation included. Must be an integer >= 1.
        on_error: Optional callback invoked once per failed attempt with
            ``(failure, attempt, call)``. Its return value is ignored.
        retry_on: Optional predicate, or sequence of predicates, called
            with ``(failure, attempt, call)``. When omitted, every
            exception is retried and every returned value is a success.
            When given, it is also applied to returned values, and a
            sequence retries if any of its predicates returns ``True``.
        delay: Optional pause before the next attempt, either a fixed
            number of seconds or a callable returning the number of
            seconds for ``(failure, attempt, call)``.

    Raises:
        TypeError: If a parameter has an unsupported type.
        ValueError: If ``max_retries`` < 1 or ``delay`` is negative.

    Example:
        ```pycon
        >>> from aretryable.core.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_retries
        3
        >>> config = RetryConfig(max_retries=5, delay=0.5)
        >>> merged = config.merge(max_retries=10)
        >>> merged.max_retries, merged.delay
        (10, 0.5)
        >>> config.max_retries  # Original unchanged
        5

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    on_error: Callable[[Any, int, CallArguments], Any] | None = None
    retry_on: Predicate | Sequence[Predicate] | None = None
    delay: float | DelayFunction | None = None

    def __post_init__(self) -> None:
        validate_max_retries(self.max_retries)
        validate_on_error(self.on_error)
        validate_retry_on(self.retry_on)
        validate_delay(self.delay)
        if isinstance(self.retry_on, list):
            object.__setattr__(self, "retry_on", tuple(self.retry_on))

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new validated ``RetryConfig`` instance.

        Example:
            ```pycon
            >>> from aretryable.core.config import RetryConfig
            >>> config = RetryConfig(max_retries=3)
            >>> config.merge(max_retries=5, delay=None).max_retries
            5

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
