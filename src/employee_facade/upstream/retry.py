"""
employee_facade.upstream.retry

Retry-on-rate-limit wrapper for outbound calls.

Responsibilities:
- Run a no-argument async unit of work (one outbound call).
- Retry only when the upstream answers 429, with exponential backoff.
- Return an explicit `Success` / `Failure` instead of letting exceptions drive the loop.

Invariants:
- At most `max_attempts` calls; exactly one wait between consecutive attempts.
- A non-429 failure ends the loop on the attempt it happened, with no wait.
- On exhaustion the `Failure` holds the last 429 error itself (not a wrapper).
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx

from employee_facade.observability.logging import get_logger
from employee_facade.settings import Settings

T = TypeVar("T")

log = get_logger(__name__)

TOO_MANY_REQUESTS = 429


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    max_attempts: int = 3
    base_delay_ms: int = 500
    multiplier: float = 2.0

    @classmethod
    def from_settings(cls, settings: Settings) -> RetryPolicy:
        return cls(
            max_attempts=settings.retry_max_attempts,
            base_delay_ms=settings.retry_base_delay_ms,
            multiplier=settings.retry_backoff_multiplier,
        )

    def worst_case_wait_ms(self) -> float:
        # Waits happen between attempts only: base * (1 + m + ... + m^(n-2)).
        return sum(self.base_delay_ms * self.multiplier**i for i in range(self.max_attempts - 1))


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T
    attempts: int


@dataclass(frozen=True, slots=True)
class Failure:
    error: Exception
    attempts: int

    @property
    def rate_limited(self) -> bool:
        return is_rate_limited(self.error)


RetryResult = Success[T] | Failure


def is_rate_limited(error: BaseException) -> bool:
    return (
        isinstance(error, httpx.HTTPStatusError)
        and error.response.status_code == TOO_MANY_REQUESTS
    )


class RetryingHttpClient:
    """
    Executes outbound calls under a `RetryPolicy`.
    `sleep` is injectable so callers (and tests) control how backoff is spent.
    """

    def __init__(
        self,
        *,
        policy: RetryPolicy | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._policy = policy or RetryPolicy()
        self._sleep = sleep

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        description: str,
    ) -> RetryResult[T]:
        attempt = 1
        delay_ms: float = self._policy.base_delay_ms

        while True:
            try:
                value = await operation()
            except Exception as e:
                if not is_rate_limited(e):
                    return Failure(error=e, attempts=attempt)
                if attempt >= self._policy.max_attempts:
                    log.warning(
                        "upstream_rate_limit_exhausted",
                        operation=description,
                        attempts=attempt,
                    )
                    return Failure(error=e, attempts=attempt)

                log.warning(
                    "upstream_rate_limited",
                    operation=description,
                    attempt=attempt,
                    max_attempts=self._policy.max_attempts,
                    backoff_ms=delay_ms,
                )
                await self._sleep(delay_ms / 1000)
                attempt += 1
                delay_ms *= self._policy.multiplier
                continue

            return Success(value=value, attempts=attempt)


# --- Module Notes -----------------------------------------------------------
# Retry-After headers are not consulted: the backoff schedule is fixed by the policy
# so the worst-case latency of a request is bounded by `worst_case_wait_ms()`.
