from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks.

    Returns:
        A Mock object that can be used as ``on_error`` or as a
        ``retry_on`` predicate.
    """
    return Mock()


@pytest.fixture
def always_failing() -> AsyncMock:
    """Create an async operation raising a different error on each
    call.

    The n-th call raises ``RuntimeError("failure n")``, for up to 10
    calls.
    """
    return AsyncMock(side_effect=[RuntimeError(f"failure {n}") for n in range(1, 11)])
