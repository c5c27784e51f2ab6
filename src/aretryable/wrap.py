r"""Wrap operations with automatic retry logic.

This module provides the ``as_retryable`` function and its decorator
form ``retryable``.
"""

from __future__ import annotations

__all__ = ["as_retryable", "retryable"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretryable.core.config import RetryConfig
from aretryable.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


def as_retryable(
    operation: Callable[..., Awaitable[T] | T],
    config: RetryConfig | None = None,
    **options: Any,
) -> Callable[..., Awaitable[T]]:
    """Wrap an operation with automatic retry logic.

    The returned coroutine function takes the same arguments as
    ``operation`` and forwards them unchanged on every attempt. Building
    the wrapper validates the configuration but never calls
    ``operation`` or any callback.

    Args:
        operation: The operation to wrap. Usually a coroutine function,
            but any callable works: awaitable return values are awaited.
        config: Optional retry configuration. Defaults to ``RetryConfig()``.
        **options: ``RetryConfig`` fields (``max_retries``, ``on_error``,
            ``retry_on``, ``delay``). When ``config`` is also given, the
            non-None options override it.

    Returns:
        The wrapped coroutine function.

    Raises:
        TypeError: If an option has an unsupported type.
        ValueError: If an option has an invalid value.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretryable import as_retryable
        >>> attempts = []
        >>> async def fetch_status():
        ...     attempts.append(len(attempts) + 1)
        ...     return "pending" if len(attempts) < 3 else "done"
        ...
        >>> wait_until_done = as_retryable(
        ...     fetch_status, max_retries=5, retry_on=lambda status, *_: status == "pending"
        ... )
        >>> asyncio.run(wait_until_done())
        'done'
        >>> attempts
        [1, 2, 3]

        ```
    """
    config = RetryConfig(**options) if config is None else config.merge(**options)
    executor = AsyncRetryExecutor(config)

    @functools.wraps(operation)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        return await executor.execute(operation, *args, **kwargs)

    wrapper.retry_config = config  # type: ignore[attr-defined]
    return wrapper


def retryable(
    operation: Callable[..., Awaitable[T] | T] | None = None,
    /,
    *,
    config: RetryConfig | None = None,
    **options: Any,
) -> Any:
    """Decorator form of ``as_retryable``.

    Can be used bare (``@retryable``) or with options
    (``@retryable(max_retries=5, delay=0.5)``).

    Args:
        operation: The decorated operation, when used bare.
        config: Optional retry configuration.
        **options: ``RetryConfig`` fields overriding ``config``.

    Returns:
        The wrapped coroutine function, or a decorator if ``operation``
        is not given.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretryable import retryable
        >>> @retryable(max_retries=2)
        ... async def divide(a, b):
        ...     return a / b
        ...
        >>> asyncio.run(divide(6, 3))
        2.0
        >>> divide.retry_config.max_retries
        2

        ```
    """
    if operation is not None:
        return as_retryable(operation, config, **options)

    def decorator(func: Callable[..., Awaitable[T] | T]) -> Callable[..., Awaitable[T]]:
        return as_retryable(func, config, **options)

    return decorator
