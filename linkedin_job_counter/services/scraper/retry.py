# =============================================================================
# Bounded Retry
# =============================================================================
"""
Bounded retry combinator for async operations.

Runs an operation up to a fixed number of times with a fixed pause between
attempts. Failures before the last attempt are logged and swallowed; the
last attempt's failure propagates unchanged.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int,
    delay_seconds: float,
    description: str = "operation",
    sleep: SleepFunc = asyncio.sleep,
) -> T:
    """
    Run an async operation with a bounded number of attempts.

    Args:
        operation: Zero-argument coroutine function to run.
        max_attempts: Total attempts allowed, at least 1.
        delay_seconds: Fixed pause between attempts.
        description: Label used in log messages.
        sleep: Coroutine used to pause between attempts.

    Returns:
        The operation's result from the first successful attempt.

    Raises:
        ValueError: If max_attempts is less than 1.
        Exception: The last attempt's exception once the budget is spent.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(1, max_attempts + 1):
        try:
            return await operation()
        except Exception as e:
            attempts_left = max_attempts - attempt
            if attempts_left == 0:
                logger.warning(f"{description} failed after {max_attempts} attempts: {e}")
                raise
            logger.warning(
                f"{description} failed, retrying... ({attempts_left} attempts left): {e}"
            )
            await sleep(delay_seconds)

    # Unreachable: the loop either returns or raises
    raise RuntimeError("retry loop exited without a result")
