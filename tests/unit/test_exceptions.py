r"""Unit tests for RetryResultError."""

from __future__ import annotations

import pytest

from aretryable.exceptions import RetryResultError


def test_retry_result_error_attributes() -> None:
    result = {"status": "pending"}
    error = RetryResultError(result=result, attempts=4)

    assert error.result is result
    assert error.attempts == 4


def test_retry_result_error_message() -> None:
    error = RetryResultError(result=None, attempts=2)
    assert str(error) == "result None was still flagged for retry after 2 attempts"


def test_retry_result_error_is_exception() -> None:
    with pytest.raises(Exception, match=r"after 3 attempts"):
        raise RetryResultError(result=0, attempts=3)
