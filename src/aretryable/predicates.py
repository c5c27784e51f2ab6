r"""HTTP status predicates for the ``retry_on`` option.

The predicates accept the failure of an attempt: an ``httpx.Response``
returned by the operation, an ``httpx.HTTPStatusError`` raised by
``Response.raise_for_status()``, or any response-like object exposing
``status_code`` or ``status``. Values without a status never match.

Example:
    ```pycon
    >>> import httpx
    >>> from aretryable.predicates import network_errors, rate_limiting_error
    >>> network_errors(httpx.Response(503))
    True
    >>> rate_limiting_error(httpx.Response(429))
    True
    >>> network_errors(ValueError("boom"))
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "NETWORK_ERROR_STATUS_CODES",
    "RATE_LIMITING_STATUS_CODE",
    "get_status_code",
    "network_errors",
    "rate_limiting_error",
]

from typing import Any

import httpx

# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
NETWORK_ERROR_STATUS_CODES = (502, 503, 504)

# 429: Too Many Requests - Rate limiting
RATE_LIMITING_STATUS_CODE = 429


def get_status_code(failure: Any) -> int | None:
    """Extract the HTTP status code of an attempt failure.

    Args:
        failure: A response-like object or an exception.

    Returns:
        The status code, or ``None`` if the failure carries none.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretryable.predicates import get_status_code
        >>> get_status_code(httpx.Response(502))
        502
        >>> get_status_code(TimeoutError()) is None
        True

        ```
    """
    if isinstance(failure, httpx.HTTPStatusError):
        return failure.response.status_code
    for name in ("status_code", "status"):
        status = getattr(failure, name, None)
        if isinstance(status, int):
            return status
    return None


def network_errors(failure: Any, *_: Any) -> bool:
    """Return ``True`` for transient gateway statuses (502, 503, 504).

    Args:
        failure: The failure of the attempt.

    Returns:
        ``True`` if the status code is 502, 503 or 504.
    """
    return get_status_code(failure) in NETWORK_ERROR_STATUS_CODES


def rate_limiting_error(failure: Any, *_: Any) -> bool:
    """Return ``True`` for the rate-limiting status (429).

    Args:
        failure: The failure of the attempt.

    Returns:
        ``True`` if the status code is 429.
    """
    return get_status_code(failure) == RATE_LIMITING_STATUS_CODE
