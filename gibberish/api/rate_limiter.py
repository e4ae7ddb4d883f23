"""Module with rate limiter for FastAPI endpoints."""

from collections import OrderedDict, deque
from datetime import UTC, datetime, timedelta
from threading import Lock

from fastapi import HTTPException
from loguru import logger

from gibberish.configuration import config


class RateLimiter:
    """
    In-memory sliding window rate limiter keyed by client identifiers.

    Clients are kept in order of their latest request, so clients without a
    request in the last interval are dropped from the front of the storage.
    """

    def __init__(
        self,
        max_requests_per_interval: int = config.api_max_requests_per_interval,
        interval: timedelta = config.api_rate_limiter_interval,
    ) -> None:
        """
        Set up parameters and an in-memory storage.

        Args:
            max_requests_per_interval (int, optional): The maximum number of
                detection requests a client may send within `interval`.
                Defaults to the value from the configuration.
            interval (timedelta, optional): Length of the sliding window.
                Defaults to the value from the configuration.

        Raises:
            ValueError: Raised if `max_requests_per_interval` is lower than 1.
        """
        if max_requests_per_interval < 1:
            raise ValueError("`max_requests_per_interval` must be >= 1.")
        self._max_requests_per_interval = max_requests_per_interval
        self._interval = interval
        self._requests: OrderedDict[str, deque[datetime]] = OrderedDict()
        self._lock = Lock()

    def __len__(self) -> int:
        """Get the number of clients with requests in the current interval."""
        return len(self._requests)

    def _forget_idle_clients(self, now: datetime) -> None:
        while self._requests:
            identifier, window = next(iter(self._requests.items()))
            if window and window[-1] + self._interval > now:
                break
            del self._requests[identifier]

    def __call__(self, identifier: str) -> None:
        """
        Register a request of a client and check whether it exceeds the limit.

        Args:
            identifier (str): Identifier of a client, e.g. its IP address.

        Raises:
            HTTPException: Raised with status 429 if the limit has been exceeded.
        """
        now = datetime.now(tz=UTC)
        with self._lock:
            self._forget_idle_clients(now)
            window = self._requests.setdefault(identifier, deque())

            while window and window[0] + self._interval <= now:
                window.popleft()

            if len(window) >= self._max_requests_per_interval:
                logger.warning(f"Rate limit exceeded by {identifier}.")
                raise HTTPException(
                    status_code=429,
                    detail=(
                        f"You are allowed to send {self._max_requests_per_interval} "
                        f"request(s) every {self._interval}. Please, try again later!"
                    ),
                )

            window.append(now)
            self._requests.move_to_end(identifier)
