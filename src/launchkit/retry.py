"""
Exponential-backoff retry for async operations.

Delay before retry n (0-based) is min(base_delay * 2**n, max_delay):
1s, 2s, 4s with the defaults. No jitter. The last failure is always
re-raised unchanged once the budget is spent.
"""

import asyncio
import functools
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from .config import RetryConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    """How many times, and how patiently, to retry an operation."""
    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 10.0
    max_elapsed: Optional[float] = None
    retry_on: Tuple[Type[BaseException], ...] = (Exception,)
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    clock: Callable[[], float] = time.monotonic

    @classmethod
    def from_config(cls, cfg: RetryConfig, **overrides) -> "RetryPolicy":
        """Build a policy from a RetryConfig section."""
        policy = cls(
            max_retries=cfg.max_retries,
            base_delay=cfg.base_delay_seconds,
            max_delay=cfg.max_delay_seconds,
            max_elapsed=cfg.max_elapsed_seconds,
        )
        for key, value in overrides.items():
            setattr(policy, key, value)
        return policy

    def delay_for(self, attempt: int) -> float:
        """Delay in seconds before retry number ``attempt`` (0-based)."""
        return min(self.base_delay * (2 ** attempt), self.max_delay)

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> T:
        """
        Run ``operation`` until it succeeds or the retry budget is spent.

        Args:
            operation: Zero-argument coroutine factory, called once per attempt
            cancel_event: When set, no further retries are started

        Returns:
            The operation's result

        Raises:
            The last failure, unchanged, after the final attempt (or as soon
            as the cancel event or elapsed-time budget stops retrying).
        """
        started = self.clock()
        attempt = 0

        while True:
            try:
                return await operation()
            except self.retry_on as e:
                if attempt >= self.max_retries:
                    raise

                if cancel_event is not None and cancel_event.is_set():
                    logger.warning("Retry cancelled by caller, giving up")
                    raise

                delay = self.delay_for(attempt)
                if self.max_elapsed is not None and self.clock() - started + delay > self.max_elapsed:
                    logger.warning(f"Retry budget of {self.max_elapsed}s exhausted, giving up")
                    raise

                retries_left = self.max_retries - attempt - 1
                logger.warning(f"Retrying operation in {delay:.2f}s after {e!r}. Retries left: {retries_left}")
                await self.sleep(delay)
                attempt += 1


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    retries: int = 3,
    *,
    cancel_event: Optional[asyncio.Event] = None,
    **policy_kwargs,
) -> T:
    """Functional form: run ``operation`` under a one-off RetryPolicy."""
    policy = RetryPolicy(max_retries=retries, **policy_kwargs)
    return await policy.run(operation, cancel_event=cancel_event)


def retry(policy: Optional[RetryPolicy] = None):
    """
    Decorator form for async functions.

    Example:
        @retry(RetryPolicy(max_retries=2))
        async def fetch(): ...
    """
    policy = policy or RetryPolicy()

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            return await policy.run(lambda: func(*args, **kwargs))
        return wrapper

    return decorator
