"""
API - Rate Limiting.

Sliding-window request limiter keyed by client, applied to
the /api/ routes as HTTP middleware.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RequestRateLimiter:
    """
    Rate limiter for API requests.

    Each client may make `max_requests` requests within any
    `window_seconds` window.
    """

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: float = 900.0,
    ):
        """Initialize rate limiter."""
        self._max_requests = max_requests
        self._window = timedelta(seconds=window_seconds)
        self._requests: Dict[str, List[datetime]] = {}
        self._last_prune: Optional[datetime] = None
        self._lock = asyncio.Lock()

    @property
    def tracked_clients(self) -> int:
        return len(self._requests)

    def _prune(self, now: datetime, window_start: datetime) -> None:
        """Drop clients with no request inside the window, at most once per window."""
        if self._last_prune is not None and now - self._last_prune < self._window:
            return

        stale = [
            key for key, times in self._requests.items()
            if not times or max(times) <= window_start
        ]
        for key in stale:
            del self._requests[key]

        self._last_prune = now
        if stale:
            logger.debug(f"Pruned {len(stale)} idle rate limit clients")

    async def acquire(self, client_key: str, now: Optional[datetime] = None) -> bool:
        """Try to record a request for a client."""
        async with self._lock:
            now = now or datetime.now(timezone.utc)
            window_start = now - self._window

            self._prune(now, window_start)

            # Clean old entries
            recent = [t for t in self._requests.get(client_key, []) if t > window_start]

            if len(recent) >= self._max_requests:
                self._requests[client_key] = recent
                return False

            recent.append(now)
            self._requests[client_key] = recent
            return True

    def remaining(self, client_key: str, now: Optional[datetime] = None) -> int:
        """Remaining requests for a client in the current window."""
        now = now or datetime.now(timezone.utc)
        window_start = now - self._window
        count = sum(1 for t in self._requests.get(client_key, []) if t > window_start)
        return max(0, self._max_requests - count)

    def reset(self) -> None:
        self._requests.clear()
        self._last_prune = None


def client_key(request: Request) -> str:
    """Identify the caller by remote address."""
    return request.client.host if request.client else "unknown"


def build_rate_limit_middleware(limiter: RequestRateLimiter, path_prefix: str = "/api/"):
    """Create HTTP middleware that enforces the limiter on a path prefix."""

    async def rate_limit_middleware(request: Request, call_next):
        if request.url.path.startswith(path_prefix):
            key = client_key(request)
            if not await limiter.acquire(key):
                logger.warning(f"Rate limit exceeded for {key} on {request.url.path}")
                return JSONResponse(
                    status_code=429,
                    content={
                        "error": "Too many requests",
                        "message": "Too many requests from this IP, please try again later.",
                    },
                )
        return await call_next(request)

    return rate_limit_middleware
