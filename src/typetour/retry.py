"""
Fixed-delay retry for coroutine operations.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from .errors import TourError

T = TypeVar("T")

# Set up logging
logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    delay: float = 1.0,
    sleep: Optional[SleepFunc] = None,
    retry_on: Tuple[Type[BaseException], ...] = (TourError,),
    description: str = "operation",
) -> T:
    """Await ``operation()`` until it succeeds or ``max_retries`` attempts fail.

    The pause between attempts is constant; there is no pause after the last
    attempt. Errors outside ``retry_on`` propagate immediately. When every
    attempt fails the last error is re-raised.
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")
    sleep = sleep or asyncio.sleep

    last_error: Optional[BaseException] = None
    for attempt in range(1, max_retries + 1):
        logger.info(f"Attempt {attempt} to fetch {description}")
        try:
            return await operation()
        except retry_on as error:
            last_error = error
            if attempt < max_retries:
                logger.info(f"Attempt {attempt} failed ({error}), retrying...")
                await sleep(delay)
            else:
                logger.info(f"Attempt {attempt} failed ({error}), giving up")

    raise last_error
