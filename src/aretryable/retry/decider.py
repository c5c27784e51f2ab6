r"""Retry decision logic for exceptions and returned values.

This module normalizes the ``retry_on`` option into an explicit policy
and provides the RetryDecider class that applies it to the outcome of
each attempt.
"""

from __future__ import annotations

__all__ = [
    "CustomRetryOn",
    "DefaultRetryOn",
    "RetryDecider",
    "RetryOnPolicy",
    "any_of",
    "build_retry_on_policy",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretryable.callbacks import CallArguments


@dataclass(frozen=True)
class DefaultRetryOn:
    """Policy used when no ``retry_on`` is configured.

    Every exception is retryable and every returned value is a success.
    """


@dataclass(frozen=True)
class CustomRetryOn:
    """Policy wrapping a user supplied predicate.

    The predicate is applied to both exceptions and returned values.

    Attributes:
        predicate: Called with ``(failure, attempt, call)``.
    """

    predicate: Callable[[Any, int, CallArguments], bool]


RetryOnPolicy = DefaultRetryOn | CustomRetryOn


def any_of(
    *predicates: Callable[[Any, int, CallArguments], bool],
) -> Callable[[Any, int, CallArguments], bool]:
    """Combine several predicates with a short-circuiting logical OR.

    Predicates are evaluated left to right and evaluation stops at the
    first one returning a truthy value. With no predicates, the combined
    predicate always returns ``False``.

    Args:
        *predicates: The predicates to combine.

    Returns:
        A single predicate.

    Example:
        ```pycon
        >>> from aretryable.retry.decider import any_of
        >>> is_none = lambda value, *_: value is None
        >>> is_empty = lambda value, *_: value == ""
        >>> predicate = any_of(is_none, is_empty)
        >>> predicate("", 1, None)
        True
        >>> predicate("ok", 1, None)
        False

        ```
    """

    def predicate(failure: Any, attempt: int, call: CallArguments) -> bool:
        return any(pred(failure, attempt, call) for pred in predicates)

    return predicate


def build_retry_on_policy(
    retry_on: Callable[..., bool] | Sequence[Callable[..., bool]] | None,
) -> RetryOnPolicy:
    """Normalize the ``retry_on`` option into a policy.

    Args:
        retry_on: ``None``, a predicate, or a sequence of predicates.

    Returns:
        ``DefaultRetryOn()`` if ``retry_on`` is ``None``, otherwise a
        ``CustomRetryOn`` holding a single predicate.

    Example:
        ```pycon
        >>> from aretryable.retry.decider import build_retry_on_policy
        >>> build_retry_on_policy(None)
        DefaultRetryOn()
        >>> policy = build_retry_on_policy([lambda *_: False, lambda *_: True])
        >>> policy.predicate(ValueError(), 1, None)
        True

        ```
    """
    if retry_on is None:
        return DefaultRetryOn()
    if callable(retry_on):
        return CustomRetryOn(retry_on)
    return CustomRetryOn(any_of(*retry_on))


class RetryDecider:
    """Decides whether an attempt outcome should trigger another attempt.

    Args:
        policy: The normalized retry-on policy.

    Example:
        ```pycon
        >>> from aretryable.retry.decider import DefaultRetryOn, RetryDecider
        >>> decider = RetryDecider(DefaultRetryOn())
        >>> decider.should_retry_exception(ValueError(), 1, None)
        True
        >>> decider.should_retry_result("done", 1, None)
        False

        ```
    """

    def __init__(self, policy: RetryOnPolicy) -> None:
        self.policy = policy

    def should_retry_exception(
        self, exception: Exception, attempt: int, call: CallArguments
    ) -> bool:
        """Determine if an exception raised by the operation is
        retryable.

        Args:
            exception: The exception raised by the attempt.
            attempt: The attempt number (1-indexed).
            call: The arguments of the original call.

        Returns:
            ``True`` if the exception is retryable.
        """
        if isinstance(self.policy, CustomRetryOn):
            return bool(self.policy.predicate(exception, attempt, call))
        return True

    def should_retry_result(self, result: Any, attempt: int, call: CallArguments) -> bool:
        """Determine if a value returned by the operation is a soft
        failure.

        Args:
            result: The value returned by the attempt.
            attempt: The attempt number (1-indexed).
            call: The arguments of the original call.

        Returns:
            ``True`` if the value must be treated as a failure.
        """
        if isinstance(self.policy, CustomRetryOn):
            return bool(self.policy.predicate(result, attempt, call))
        return False
