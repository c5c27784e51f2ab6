r"""aretryable - Retry logic for asynchronous operations.

This package wraps any asynchronous operation with a retry policy. The
wrapped callable re-invokes the operation when it raises, or when it
returns a value flagged by a custom ``retry_on`` predicate, up to a
bounded number of attempts, with an optional delay between attempts.

Key Features:
    - Bounded attempts (``max_retries`` counts the first invocation)
    - Retry on exceptions and on "soft failure" return values
    - Predicates combinable as a sequence (retry if any matches)
    - Fixed, computed, backoff or randomized delays between attempts
    - ``on_error`` notification for every failed attempt
    - HTTP status predicates for httpx responses (429, 502, 503, 504)

Example:
    ```pycon
    >>> import asyncio
    >>> import httpx
    >>> from aretryable import as_retryable, network_errors
    >>> from aretryable.backoff import ExponentialBackoff
    >>> async def get_user(client, user_id):
    ...     return await client.get(f"/users/{user_id}")
    ...
    >>> get_user = as_retryable(
    ...     get_user, max_retries=5, retry_on=network_errors, delay=ExponentialBackoff()
    ... )
    >>> async def main():
    ...     async with httpx.AsyncClient(base_url="https://api.example.com") as client:
    ...         return await get_user(client, 42)
    ...
    >>> response = asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "CallArguments",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "RetryConfig",
    "RetryResultError",
    "__version__",
    "as_retryable",
    "network_errors",
    "random_between",
    "rate_limiting_error",
    "retryable",
]

from importlib.metadata import PackageNotFoundError, version

from aretryable.backoff import ConstantBackoff, ExponentialBackoff, LinearBackoff, random_between
from aretryable.callbacks import CallArguments
from aretryable.core import DEFAULT_MAX_RETRIES, RetryConfig
from aretryable.exceptions import RetryResultError
from aretryable.predicates import network_errors, rate_limiting_error
from aretryable.wrap import as_retryable, retryable

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
