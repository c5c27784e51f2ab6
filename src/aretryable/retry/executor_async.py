r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs an
operation until it succeeds, its failure is not retryable, or the
configured number of attempts is exhausted.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import inspect
import logging
from typing import TYPE_CHECKING, Any, NoReturn

from aretryable.callbacks import CallArguments
from aretryable.exceptions import RetryResultError
from aretryable.retry.decider import RetryDecider, build_retry_on_policy
from aretryable.retry.manager import CallbackManager
from aretryable.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryable.core.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an operation with automatic retry logic.

    The executor is built once per wrapped operation. All the option
    dispatching (``delay`` and ``retry_on`` shapes) happens here, so
    that each attempt only calls already normalized functions. The
    executor holds no per-call state and can serve concurrent calls.

    The executor orchestrates the following components:
    - RetryDecider: Determines whether an exception or a returned value
      should trigger another attempt
    - RetryStrategy: Computes and waits the delay between attempts
    - CallbackManager: Notifies ``on_error`` of every failed attempt

    Args:
        config: The retry configuration.

    Attributes:
        config: The retry configuration.
        decider: Logic for deciding whether to retry.
        strategy: Strategy for the delay between attempts.
        callbacks: Manager for ``on_error`` notifications.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretryable.core import RetryConfig
        >>> from aretryable.retry import AsyncRetryExecutor
        >>> calls = []
        >>> async def flaky(value):
        ...     calls.append(value)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("reset by peer")
        ...     return value * 2
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(max_retries=3))
        >>> asyncio.run(executor.execute(flaky, 21))
        42
        >>> calls
        [21, 21]

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.decider: RetryDecider = RetryDecider(build_retry_on_policy(config.retry_on))
        self.strategy: RetryStrategy = RetryStrategy(config.delay)
        self.callbacks: CallbackManager = CallbackManager(config.on_error)

    async def execute(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Execute the operation with automatic retry logic.

        The operation is called with exactly ``args`` and ``kwargs`` on
        every attempt. If it returns an awaitable, the awaitable is
        awaited.

        The retry loop handles:
        - Returned values: returned immediately, unless a custom
          ``retry_on`` flags them, in which case they are soft failures
        - Exceptions: retried unless a custom ``retry_on`` rejects them
        - ``BaseException`` subclasses that are not ``Exception`` (for
          example ``asyncio.CancelledError``): never caught

        ``on_error`` is notified of every failed attempt, the final one
        included. No delay follows the final attempt.

        Args:
            operation: The operation to call.
            *args: Positional arguments passed to the operation.
            **kwargs: Keyword arguments passed to the operation.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The exception raised by the final attempt, or by
                the first attempt whose exception is not retryable. It is
                re-raised unchanged.
            RetryResultError: If the value returned by the final attempt
                is flagged by ``retry_on`` and is not itself an exception.
        """
        call = CallArguments(args, kwargs)
        max_retries = self.config.max_retries
        attempt = 1

        while True:
            try:
                result = operation(*args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:
                self.callbacks.notify(exc, attempt, call)
                if attempt == max_retries:
                    logger.debug(
                        f"Attempt {attempt}/{max_retries} raised {type(exc).__name__}, "
                        "no attempts left"
                    )
                    raise
                if not self.decider.should_retry_exception(exc, attempt, call):
                    logger.debug(
                        f"Attempt {attempt}/{max_retries} raised {type(exc).__name__}, "
                        "retry_on returned False"
                    )
                    raise
                logger.debug(
                    f"Attempt {attempt}/{max_retries} raised {type(exc).__name__}: {exc}, "
                    "will retry"
                )
                await self.strategy.wait(exc, attempt, call)
                attempt += 1
                continue

            if not self.decider.should_retry_result(result, attempt, call):
                return result

            self.callbacks.notify(result, attempt, call)
            if attempt == max_retries:
                logger.debug(
                    f"Attempt {attempt}/{max_retries} result flagged by retry_on, "
                    "no attempts left"
                )
                _raise_flagged_result(result, attempt)
            logger.debug(
                f"Attempt {attempt}/{max_retries} result flagged by retry_on, will retry"
            )
            await self.strategy.wait(result, attempt, call)
            attempt += 1


def _raise_flagged_result(result: Any, attempts: int) -> NoReturn:
    if isinstance(result, BaseException):
        raise result
    raise RetryResultError(result=result, attempts=attempts)
