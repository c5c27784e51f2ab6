r"""Unit tests for configuration validation helpers."""

from __future__ import annotations

import pytest

from aretryable.backoff import LinearBackoff
from aretryable.core.validation import (
    validate_delay,
    validate_max_retries,
    validate_on_error,
    validate_retry_on,
)

##########################################
#     Tests for validate_max_retries     #
##########################################


@pytest.mark.parametrize("max_retries", [1, 3, 100])
def test_validate_max_retries_valid(max_retries: int) -> None:
    validate_max_retries(max_retries)


@pytest.mark.parametrize("max_retries", [0, -1])
def test_validate_max_retries_too_small(max_retries: int) -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 1"):
        validate_max_retries(max_retries)


@pytest.mark.parametrize("max_retries", [1.0, "3", None, True])
def test_validate_max_retries_not_int(max_retries: object) -> None:
    with pytest.raises(TypeError, match=r"max_retries must be an int"):
        validate_max_retries(max_retries)


####################################
#     Tests for validate_delay     #
####################################


@pytest.mark.parametrize("delay", [None, 0, 0.5, 10, LinearBackoff(), lambda *_: 1.0])
def test_validate_delay_valid(delay: object) -> None:
    validate_delay(delay)


@pytest.mark.parametrize("delay", ["1", [1.0], True])
def test_validate_delay_wrong_type(delay: object) -> None:
    with pytest.raises(TypeError, match=r"delay must be a number, a callable or None"):
        validate_delay(delay)


@pytest.mark.parametrize("delay", [-1, float("inf")])
def test_validate_delay_invalid_value(delay: float) -> None:
    with pytest.raises(ValueError, match=r"delay must be a non-negative finite number"):
        validate_delay(delay)


#######################################
#     Tests for validate_retry_on     #
#######################################


@pytest.mark.parametrize(
    "retry_on", [None, lambda *_: True, [], (lambda *_: True,), [len, callable]]
)
def test_validate_retry_on_valid(retry_on: object) -> None:
    validate_retry_on(retry_on)


@pytest.mark.parametrize("retry_on", ["always", 429, {"a": len}])
def test_validate_retry_on_wrong_type(retry_on: object) -> None:
    with pytest.raises(TypeError, match=r"retry_on must be a callable"):
        validate_retry_on(retry_on)


def test_validate_retry_on_item_not_callable() -> None:
    with pytest.raises(TypeError, match=r"retry_on\[0\] must be callable, got int"):
        validate_retry_on([503])


#######################################
#     Tests for validate_on_error     #
#######################################


@pytest.mark.parametrize("on_error", [None, print, lambda *_: None])
def test_validate_on_error_valid(on_error: object) -> None:
    validate_on_error(on_error)


def test_validate_on_error_not_callable() -> None:
    with pytest.raises(TypeError, match=r"on_error must be callable or None, got list"):
        validate_on_error([])
