r"""Validation utilities for retry configuration values.

The helpers in this module are called once, when a ``RetryConfig`` is
built, so that misconfigured retry policies fail fast instead of
surfacing on the first failed attempt.
"""

from __future__ import annotations

__all__ = [
    "validate_delay",
    "validate_max_retries",
    "validate_on_error",
    "validate_retry_on",
]

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any


def validate_max_retries(max_retries: Any) -> None:
    """Validate the total number of attempts.

    Args:
        max_retries: The total number of attempts, including the first
            one. Must be an integer >= 1.

    Raises:
        TypeError: If ``max_retries`` is not an integer.
        ValueError: If ``max_retries`` is lower than 1.

    Example:
        ```pycon
        >>> from aretryable.core.validation import validate_max_retries
        >>> validate_max_retries(3)
        >>> validate_max_retries(0)
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 1, got 0

        ```
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an int, got {type(max_retries).__name__}"
        raise TypeError(msg)
    if max_retries < 1:
        msg = f"max_retries must be >= 1, got {max_retries}"
        raise ValueError(msg)


def validate_delay(delay: Any) -> None:
    """Validate the inter-attempt delay.

    Args:
        delay: ``None``, a non-negative finite number of seconds, or a
            callable returning the number of seconds to wait.

    Raises:
        TypeError: If ``delay`` is neither a number, a callable nor ``None``.
        ValueError: If ``delay`` is a negative or non-finite number.

    Example:
        ```pycon
        >>> from aretryable.core.validation import validate_delay
        >>> validate_delay(None)
        >>> validate_delay(0.5)
        >>> validate_delay(lambda failure, attempt, call: attempt * 0.1)
        >>> validate_delay(-1)
        Traceback (most recent call last):
        ...
        ValueError: delay must be a non-negative finite number, got -1

        ```
    """
    if delay is None or callable(delay):
        return
    if isinstance(delay, bool) or not isinstance(delay, Real):
        msg = f"delay must be a number, a callable or None, got {type(delay).__name__}"
        raise TypeError(msg)
    if delay < 0 or not math.isfinite(delay):
        msg = f"delay must be a non-negative finite number, got {delay}"
        raise ValueError(msg)


def validate_retry_on(retry_on: Any) -> None:
    """Validate the retry predicate(s).

    Args:
        retry_on: ``None``, a predicate, or a sequence of predicates.

    Raises:
        TypeError: If ``retry_on`` or one of its items is not callable.

    Example:
        ```pycon
        >>> from aretryable.core.validation import validate_retry_on
        >>> validate_retry_on(None)
        >>> validate_retry_on([lambda failure, attempt, call: True])
        >>> validate_retry_on("yes")
        Traceback (most recent call last):
        ...
        TypeError: retry_on must be a callable, a sequence of callables or None, got str

        ```
    """
    if retry_on is None or callable(retry_on):
        return
    if isinstance(retry_on, (str, bytes)) or not isinstance(retry_on, Sequence):
        msg = (
            "retry_on must be a callable, a sequence of callables or None, "
            f"got {type(retry_on).__name__}"
        )
        raise TypeError(msg)
    for index, predicate in enumerate(retry_on):
        if not callable(predicate):
            msg = f"retry_on[{index}] must be callable, got {type(predicate).__name__}"
            raise TypeError(msg)


def validate_on_error(on_error: Any) -> None:
    """Validate the error notification callback.

    Args:
        on_error: ``None`` or a callable.

    Raises:
        TypeError: If ``on_error`` is not callable.
    """
    if on_error is not None and not callable(on_error):
        msg = f"on_error must be callable or None, got {type(on_error).__name__}"
        raise TypeError(msg)
