"""
Tests for the sliding-window request limiter.
"""

from datetime import datetime, timedelta, timezone

import pytest

from api.rate_limit import RequestRateLimiter


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestRequestRateLimiter:

    @pytest.mark.asyncio
    async def test_allows_up_to_limit(self):
        limiter = RequestRateLimiter(max_requests=3, window_seconds=60)

        results = [await limiter.acquire("1.2.3.4", now=T0) for _ in range(4)]

        assert results == [True, True, True, False]
        assert limiter.remaining("1.2.3.4", now=T0) == 0

    @pytest.mark.asyncio
    async def test_clients_are_independent(self):
        limiter = RequestRateLimiter(max_requests=1, window_seconds=60)

        assert await limiter.acquire("a", now=T0) is True
        assert await limiter.acquire("b", now=T0) is True
        assert await limiter.acquire("a", now=T0) is False

    @pytest.mark.asyncio
    async def test_window_slides(self):
        limiter = RequestRateLimiter(max_requests=2, window_seconds=900)

        assert await limiter.acquire("c", now=T0) is True
        assert await limiter.acquire("c", now=T0 + timedelta(seconds=600)) is True
        assert await limiter.acquire("c", now=T0 + timedelta(seconds=899)) is False

        # First request has left the window
        assert await limiter.acquire("c", now=T0 + timedelta(seconds=901)) is True
        assert limiter.remaining("c", now=T0 + timedelta(seconds=901)) == 0
        assert limiter.remaining("c", now=T0 + timedelta(seconds=1600)) == 1

    @pytest.mark.asyncio
    async def test_reset(self):
        limiter = RequestRateLimiter(max_requests=1, window_seconds=60)
        await limiter.acquire("d", now=T0)

        limiter.reset()

        assert limiter.remaining("d", now=T0) == 1

    @pytest.mark.asyncio
    async def test_idle_clients_are_pruned(self):
        limiter = RequestRateLimiter(max_requests=5, window_seconds=1)

        for n in range(1000):
            await limiter.acquire(f"10.0.{n // 256}.{n % 256}", now=T0)
        assert limiter.tracked_clients == 1000

        assert await limiter.acquire("late", now=T0 + timedelta(hours=1)) is True
        assert limiter.tracked_clients == 1

    @pytest.mark.asyncio
    async def test_active_clients_survive_pruning(self):
        limiter = RequestRateLimiter(max_requests=5, window_seconds=900)

        await limiter.acquire("idle", now=T0)
        await limiter.acquire("active", now=T0 + timedelta(seconds=800))
        await limiter.acquire("new", now=T0 + timedelta(seconds=1000))

        assert limiter.tracked_clients == 2
        assert limiter.remaining("active", now=T0 + timedelta(seconds=1000)) == 4
