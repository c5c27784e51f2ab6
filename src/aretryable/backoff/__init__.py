r"""Delay providers for the ``delay`` option.

This package provides backoff strategies (constant, linear, exponential)
and randomized delays. Every provider is a delay function called with
``(failure, attempt, call)`` and returning a number of seconds.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "random_between",
]

from aretryable.backoff.base import BaseBackoffStrategy
from aretryable.backoff.constant import ConstantBackoff
from aretryable.backoff.exponential import ExponentialBackoff
from aretryable.backoff.jitter import random_between
from aretryable.backoff.linear import LinearBackoff
