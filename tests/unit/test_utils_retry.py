"""Unit tests for the rate limit retry decorator."""

from unittest.mock import MagicMock

import pytest
from githubkit.exception import RequestFailed

from github_release_ops.utils.retry import retry_on_rate_limit, wait_time_from_headers


def make_request_failed(status_code: int, headers: dict[str, str] | None = None) -> RequestFailed:
    """Build a RequestFailed error carrying a response double."""
    exc = RequestFailed.__new__(RequestFailed)
    exc.response = MagicMock(status_code=status_code, headers=headers or {})
    return exc


@pytest.mark.asyncio
async def test_retries_after_rate_limit() -> None:
    """Test that a 429 response is retried and the eventual result returned."""
    calls: list[int] = []

    @retry_on_rate_limit(max_retries=2)
    async def flaky() -> str:
        calls.append(1)
        if len(calls) == 1:
            raise make_request_failed(429, {"retry-after": "0"})
        return "ok"

    assert await flaky() == "ok"
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_gives_up_after_max_retries() -> None:
    """Test that the rate limit error is raised once retries are exhausted."""
    calls: list[int] = []

    @retry_on_rate_limit(max_retries=1)
    async def always_limited() -> None:
        calls.append(1)
        raise make_request_failed(429, {"retry-after": "0"})

    with pytest.raises(RequestFailed):
        await always_limited()
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_other_failures_are_not_retried() -> None:
    """Test that non rate limit errors propagate immediately."""
    calls: list[int] = []

    @retry_on_rate_limit()
    async def not_found() -> None:
        calls.append(1)
        raise make_request_failed(404)

    with pytest.raises(RequestFailed):
        await not_found()
    assert len(calls) == 1


def test_rejects_sync_functions() -> None:
    """Test that the decorator only accepts coroutine functions."""
    with pytest.raises(TypeError):

        @retry_on_rate_limit()
        def sync_function() -> None:
            pass


@pytest.mark.parametrize(
    "headers,expected",
    [
        pytest.param({"retry-after": "7"}, 7.0, id="retry-after"),
        pytest.param({"retry-after": "soon"}, 10.0, id="invalid retry-after"),
        pytest.param({"x-ratelimit-reset": "not-a-number"}, 10.0, id="invalid reset"),
        pytest.param({"x-ratelimit-reset": "1"}, 10.0, id="reset in the past"),
        pytest.param({}, 10.0, id="no headers"),
    ],
)
def test_wait_time_from_headers(headers: dict[str, str], expected: float) -> None:
    """Test wait time derivation from rate limit headers."""
    assert wait_time_from_headers(headers, 10.0) == expected
