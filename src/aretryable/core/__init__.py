r"""Core configuration and validation for retryable operations."""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "RetryConfig",
    "validate_delay",
    "validate_max_retries",
    "validate_on_error",
    "validate_retry_on",
]

from aretryable.core.config import DEFAULT_MAX_RETRIES, RetryConfig
from aretryable.core.validation import (
    validate_delay,
    validate_max_retries,
    validate_on_error,
    validate_retry_on,
)
