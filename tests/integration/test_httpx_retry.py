r"""Integration tests retrying httpx requests over a mock transport."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from aretryable import (
    RetryResultError,
    as_retryable,
    network_errors,
    random_between,
    rate_limiting_error,
)


def make_client(*status_codes: int) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
    """Create a client answering each request with the next status
    code."""
    requests: list[httpx.Request] = []
    responses = iter(status_codes)

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(next(responses), json={"attempt": len(requests)})

    client = httpx.AsyncClient(
        base_url="https://api.example.com", transport=httpx.MockTransport(handler)
    )
    return client, requests


async def get_item(client: httpx.AsyncClient, item_id: int) -> httpx.Response:
    return await client.get(f"/items/{item_id}")


async def get_item_checked(client: httpx.AsyncClient, item_id: int) -> httpx.Response:
    response = await client.get(f"/items/{item_id}")
    return response.raise_for_status()


@pytest.mark.asyncio
async def test_retry_gateway_errors_until_success(mock_asleep: Mock) -> None:
    client, requests = make_client(503, 502, 200)
    fetch = as_retryable(get_item, max_retries=3, retry_on=network_errors, delay=0.2)

    async with client:
        response = await fetch(client, 7)

    assert response.status_code == 200
    assert response.json() == {"attempt": 3}
    assert [str(request.url) for request in requests] == ["https://api.example.com/items/7"] * 3
    assert mock_asleep.call_count == 2


@pytest.mark.asyncio
async def test_retry_rate_limit_and_gateway_errors(mock_asleep: Mock) -> None:
    client, requests = make_client(429, 504, 200)
    fetch = as_retryable(
        get_item,
        max_retries=3,
        retry_on=[rate_limiting_error, network_errors],
        delay=random_between(0.1, 0.3),
    )

    async with client:
        response = await fetch(client, 1)

    assert response.status_code == 200
    assert len(requests) == 3
    assert mock_asleep.call_count == 2
    assert all(0.1 <= c.args[0] <= 0.3 for c in mock_asleep.call_args_list)


@pytest.mark.asyncio
async def test_non_retryable_status_returned_as_is() -> None:
    client, requests = make_client(404)
    fetch = as_retryable(get_item, max_retries=3, retry_on=network_errors)

    async with client:
        response = await fetch(client, 1)

    assert response.status_code == 404
    assert len(requests) == 1


@pytest.mark.asyncio
async def test_exhausted_soft_failures_raise_with_last_response(mock_callback: Mock) -> None:
    client, requests = make_client(503, 503)
    fetch = as_retryable(get_item, max_retries=2, retry_on=network_errors, on_error=mock_callback)

    async with client:
        with pytest.raises(RetryResultError) as exc_info:
            await fetch(client, 1)

    assert exc_info.value.result.status_code == 503
    assert exc_info.value.result.json() == {"attempt": 2}
    assert len(requests) == 2
    assert mock_callback.call_count == 2


@pytest.mark.asyncio
async def test_raise_for_status_errors_retried_and_reraised() -> None:
    client, requests = make_client(502, 503, 504)
    fetch = as_retryable(get_item_checked, max_retries=3, retry_on=network_errors)

    async with client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await fetch(client, 1)

    assert exc_info.value.response.status_code == 504
    assert len(requests) == 3


@pytest.mark.asyncio
async def test_raise_for_status_non_retryable_error() -> None:
    client, requests = make_client(500, 200)
    fetch = as_retryable(get_item_checked, max_retries=3, retry_on=network_errors)

    async with client:
        with pytest.raises(httpx.HTTPStatusError):
            await fetch(client, 1)

    assert len(requests) == 1


@pytest.mark.asyncio
async def test_default_policy_retries_transport_errors() -> None:
    attempts = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        if len(attempts) < 3:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)
        return httpx.Response(200)

    fetch = as_retryable(get_item)
    async with httpx.AsyncClient(
        base_url="https://api.example.com", transport=httpx.MockTransport(handler)
    ) as client:
        response = await fetch(client, 3)

    assert response.status_code == 200
    assert len(attempts) == 3
