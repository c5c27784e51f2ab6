r"""Retry package implementing class-based composition pattern.

Public API:
    - AsyncRetryExecutor: Asynchronous retry executor
    - RetryDecider: Logic for deciding whether to retry
    - RetryStrategy: Strategy for the delay between attempts
    - CallbackManager: Manager for ``on_error`` notifications
    - DefaultRetryOn / CustomRetryOn: Normalized retry-on policies
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackManager",
    "CustomRetryOn",
    "DefaultRetryOn",
    "RetryDecider",
    "RetryStrategy",
    "any_of",
    "build_delay_function",
    "build_retry_on_policy",
]

from aretryable.retry.decider import (
    CustomRetryOn,
    DefaultRetryOn,
    RetryDecider,
    any_of,
    build_retry_on_policy,
)
from aretryable.retry.executor_async import AsyncRetryExecutor
from aretryable.retry.manager import CallbackManager
from aretryable.retry.strategy import RetryStrategy, build_delay_function
