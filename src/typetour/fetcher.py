"""
Simulated user fetching and the asynchronous patterns built on it.

Latency is simulated by awaiting an injectable ``sleep`` coroutine function,
so tests can swap in a recording fake or use tiny real delays.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import TourConfig
from .errors import TourError
from .models import User
from .result import Failure, Result, Success
from .retry import SleepFunc, retry_async


# Set up logging
logger = logging.getLogger(__name__)


def _consume_outcome(task: "asyncio.Future") -> None:
    """Mark a finished task's exception as retrieved."""
    if not task.cancelled():
        task.exception()


class UserFetcher:
    """Fetches users from a pretend backend with artificial latency."""

    def __init__(
        self,
        config: Optional[TourConfig] = None,
        sleep: Optional[SleepFunc] = None,
        delays: Optional[Dict[int, float]] = None,
    ):
        self.config = config or TourConfig()
        self.sleep = sleep or asyncio.sleep
        self.delays = dict(delays or {})  # Per-id overrides of config.fetch_delay
        self.fetch_count = 0

        # Set up logging based on config
        if self.config.verbose:
            logger.setLevel(logging.INFO)
        else:
            logger.setLevel(logging.WARNING)

    def delay_for(self, user_id: int) -> float:
        return self.delays.get(user_id, self.config.fetch_delay)

    async def fetch_user(self, user_id: int) -> User:
        """Fetch a single user.

        Raises:
            TourError: if ``user_id`` is zero or negative.
        """
        self.fetch_count += 1
        await self.sleep(self.delay_for(user_id))
        if user_id > 0:
            logger.info(f"Fetched user {user_id}")
            return User(
                id=user_id,
                name="John Doe",
                email=f"user{user_id}@example.com",
                age=30,
            )
        raise TourError("Invalid user ID")

    async def fetch_user_result(self, user_id: int) -> Result[User]:
        """Like ``fetch_user`` but reports failure as a ``Failure`` value."""
        try:
            return Success(await self.fetch_user(user_id))
        except TourError as error:
            return Failure(error.message)

    async def fetch_multiple_users(self, user_ids: List[int]) -> List[User]:
        """Fetch users one after another, skipping the ones that fail."""
        users = []
        for user_id in user_ids:
            try:
                users.append(await self.fetch_user(user_id))
            except TourError:
                print(f"Failed to fetch user {user_id}", file=sys.stderr)
        return users

    async def fetch_users_parallel(self, user_ids: List[int]) -> List[User]:
        """Fetch all users concurrently, in input order.

        The first failure fails the whole batch.
        """
        return list(await asyncio.gather(*(self.fetch_user(user_id) for user_id in user_ids)))

    async def race_multiple_fetches(self, user_ids: List[int]) -> User:
        """Return whichever fetch finishes first.

        If the first fetch to finish failed, its error is raised. Fetches that
        finish at the same moment are ranked by input order.
        """
        if not user_ids:
            raise ValueError("race_multiple_fetches needs at least one user id")

        tasks = [asyncio.ensure_future(self.fetch_user(user_id)) for user_id in user_ids]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        winner = next(task for task in tasks if task in done)

        # Losers' outcomes are consumed whenever they settle
        for task in tasks:
            if task is winner:
                continue
            if task.done():
                _consume_outcome(task)
            else:
                task.add_done_callback(_consume_outcome)

        if self.config.cancel_race_losers:
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.wait(pending)

        return winner.result()

    async def fetch_with_retry(self, user_id: int, max_retries: Optional[int] = None) -> User:
        """Fetch a user, retrying with a constant delay between attempts."""
        if max_retries is None:
            max_retries = self.config.max_retries
        return await retry_async(
            lambda: self.fetch_user(user_id),
            max_retries=max_retries,
            delay=self.config.retry_delay,
            sleep=self.sleep,
            description=f"user {user_id}",
        )

    async def api_call(self, endpoint: str, payload: Optional[Any] = None) -> Result[Any]:
        """Simulated generic API call returning a ``Result``."""
        try:
            await self.sleep(self.config.api_delay)
            if not endpoint:
                raise TourError("Invalid endpoint")
            logger.info(f"API call to {endpoint} succeeded")
            return Success(payload if payload is not None else {})
        except TourError as error:
            return Failure(error.message)

    async def chain_fetch(self, user_id: int = 1) -> Optional[int]:
        """Fetch a user, then use its id in a follow-up step.

        Errors are reported, not raised. Returns the id, or None on failure.
        """
        try:
            user = await self.fetch_user(user_id)
            print("User fetched:", user)
            fetched_id = user.id
            print("User ID:", fetched_id)
            return fetched_id
        except TourError as error:
            print("Error:", error.message, file=sys.stderr)
            return None

    async def demonstrate_async_await(self) -> None:
        try:
            print("Fetching user...")
            user = await self.fetch_user(1)
            print("User fetched:", user)

            print("Fetching multiple users...")
            users = await self.fetch_users_parallel([1, 2, 3])
            print("Multiple users fetched:", users)
        except TourError as error:
            print("Error:", error.message, file=sys.stderr)
