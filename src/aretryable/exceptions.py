r"""Exceptions raised by the retry controller."""

from __future__ import annotations

__all__ = ["RetryResultError"]

from typing import Any


class RetryResultError(Exception):
    """Raised when the final attempt returns a value flagged by
    ``retry_on``.

    The flagged value is kept unchanged in ``result`` so callers can tell
    a rejected result apart from an exception raised by the operation.

    Args:
        result: The value returned by the final attempt.
        attempts: The number of attempts that were made.

    Example:
        ```pycon
        >>> from aretryable.exceptions import RetryResultError
        >>> error = RetryResultError(result={"status": "pending"}, attempts=3)
        >>> error.result
        {'status': 'pending'}
        >>> error.attempts
        3
        >>> str(error)
        "result {'status': 'pending'} was still flagged for retry after 3 attempts"

        ```
    """

    def __init__(self, result: Any, attempts: int) -> None:
        super().__init__(f"result {result!r} was still flagged for retry after {attempts} attempts")
        self.result = result
        self.attempts = attempts
