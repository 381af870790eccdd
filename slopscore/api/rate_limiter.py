"""Module with rate limiter for FastAPI endpoints."""

import threading
from collections import deque
from datetime import UTC, datetime, timedelta

from fastapi import HTTPException
from loguru import logger

from slopscore.configuration import config


class RateLimiter:
    """In-memory sliding window rate limiter keyed by a client identifier."""

    def __init__(
        self,
        max_request_per_interval: int = config.api_max_requests_per_interval,
        interval: timedelta = config.api_rate_limiter_interval,
    ) -> None:
        """
        Set up parameters and an in-memory storage.

        Args:
            max_request_per_interval (int, optional): The maximum number
                of request per selected interval of time.
                Defaults to the value from the configuration.
            interval (timedelta, optional): Length of the sliding window, in which
                a limit of requests is set per user.
                Defaults to the value from the configuration.

        Raises:
            ValueError: Raised if `max_request_per_interval` is lower than 1
                (request per interval).
        """
        if max_request_per_interval < 1:
            raise ValueError("`max_request_per_interval` must be >= 1.")

        recommended_minimum_interval = timedelta(seconds=1)
        if interval < recommended_minimum_interval:
            logger.warning(
                "From the performance perspective at least one second is recommended "
                f"for {RateLimiter.__name__}'s `interval`."
            )
        self._interval = interval
        self._max_requests_per_interval = max_request_per_interval
        self._requests: dict[str, deque[datetime]] = {}
        self._lock = threading.Lock()

    def __call__(self, identifier: str) -> None:
        """
        Report a new request and check if it abuses the limit.

        Rejected requests are not counted, so a client is let through again as
        soon as its oldest accepted request leaves the window.

        Args:
            identifier (str): Identifier, such as: IP address, API key or other unique
                information differentiating users.

        Raises:
            HTTPException: Raised if the limit has been exceeded by a user.
        """
        now = datetime.now(tz=UTC)
        with self._lock:
            timestamps = self._requests.setdefault(identifier, deque())
            while timestamps and timestamps[0] + self._interval <= now:
                timestamps.popleft()

            if len(timestamps) >= self._max_requests_per_interval:
                logger.debug(f"Rate limit exceeded by `{identifier}`.")
                raise HTTPException(
                    status_code=429,
                    detail=(
                        f"You are allowed to send {self._max_requests_per_interval} "
                        f"request(s) every {self._interval}. Please, try again later!"
                    ),
                )
            timestamps.append(now)

    def reset(self) -> None:
        """Forget all recorded requests."""
        with self._lock:
            self._requests.clear()
