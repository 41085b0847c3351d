"""
Linear-backoff retry policy and the async executor that applies it.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from pydantic import BaseModel

from coding_coach.errors import CoachError, ExhaustedRetriesError

T = TypeVar("T")


class RetryDecision(BaseModel):
    retry: bool
    delay: float = 0.0


class RetryPolicy:
    """Decides whether a failed attempt is retried and how long to wait first."""

    def __init__(self, max_retries: int = 2, base_delay: float = 1.0):
        """
        Args:
            max_retries: Additional attempts allowed after the first one.
            base_delay: Seconds of delay per attempt index.
        """
        self.max_retries = max_retries
        self.base_delay = base_delay

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def decide(self, attempt: int, error: Exception) -> RetryDecision:
        """
        Args:
            attempt: 1-based index of the attempt that just failed.
            error: What the attempt failed with.
        """
        if not isinstance(error, CoachError) or not error.retryable:
            return RetryDecision(retry=False)
        if attempt >= self.max_attempts:
            return RetryDecision(retry=False)
        return RetryDecision(retry=True, delay=attempt * self.base_delay)


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Run operation until it succeeds or the policy gives up.

    Non-retryable errors propagate unchanged. Retryable errors that outlive the
    budget are wrapped in ExhaustedRetriesError.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            return await operation()
        except CoachError as e:
            decision = policy.decide(attempt, e)
            if decision.retry:
                logging.warning(
                    f"Attempt {attempt}/{policy.max_attempts} failed ({type(e).__name__}: {e}), "
                    f"retrying in {decision.delay:.1f}s"
                )
                await sleep(decision.delay)
                continue
            if not e.retryable:
                raise
            logging.error(f"Giving up after {attempt} attempt(s): {e}")
            raise ExhaustedRetriesError(attempt, e) from e
