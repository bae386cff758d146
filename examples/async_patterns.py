# examples/async_patterns.py
"""
Async pattern examples: retry, fail-fast batches and races.
These examples use per-user latency to make the outcome of each pattern visible.
"""

import asyncio
import time

from typetour import TourConfig, TourError, UserFetcher


async def retry_example():
    """
    Example: A user id that can never be fetched exhausts its attempt budget.
    """
    print("\n" + "="*60)
    print("Retry Example")
    print("="*60)

    config = TourConfig(fetch_delay=0.05, retry_delay=0.2, verbose=True)
    fetcher = UserFetcher(config)

    start = time.perf_counter()
    try:
        await fetcher.fetch_with_retry(0, max_retries=3)
    except TourError as error:
        elapsed = time.perf_counter() - start
        print(f"Gave up after {fetcher.fetch_count} attempts ({elapsed:.2f}s): {error}")


async def batch_example():
    """
    Example: Sequential fetching skips bad ids; parallel fetching fails the batch.
    """
    print("\n" + "="*60)
    print("Batch Example")
    print("="*60)

    fetcher = UserFetcher(TourConfig(fetch_delay=0.1))

    start = time.perf_counter()
    users = await fetcher.fetch_multiple_users([1, 0, 2])
    print(f"Sequential: {[u.id for u in users]} in {time.perf_counter() - start:.2f}s")

    start = time.perf_counter()
    users = await fetcher.fetch_users_parallel([1, 2, 3])
    print(f"Parallel:   {[u.id for u in users]} in {time.perf_counter() - start:.2f}s")

    try:
        await fetcher.fetch_users_parallel([1, -1, 3])
    except TourError as error:
        print(f"Parallel batch with a bad id failed: {error}")


async def race_example():
    """
    Example: The user with the shortest latency wins the race.
    """
    print("\n" + "="*60)
    print("Race Example")
    print("="*60)

    latencies = {1: 0.3, 2: 0.1, 3: 0.2}
    fetcher = UserFetcher(TourConfig(), delays=latencies)
    winner = await fetcher.race_multiple_fetches(list(latencies))
    print(f"Latencies {latencies} -> user {winner.id} arrived first")


async def main():
    await retry_example()
    await batch_example()
    await race_example()


if __name__ == "__main__":
    asyncio.run(main())
