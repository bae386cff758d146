"""
Demo driver: runs every demonstration in a fixed order.
"""

import logging
import sys
from typing import Optional

from .config import TourConfig
from .enums import Role, Status
from .errors import TourError
from .fetcher import UserFetcher
from .models import Admin, Person, User
from .overloads import combine, is_number, is_string
from .retry import SleepFunc
from .utils import full_name, square
from . import types_demo


# Set up logging
logger = logging.getLogger(__name__)


def section(title: str) -> None:
    print(f"\n--- {title} ---")


async def run_examples(config: Optional[TourConfig] = None, sleep: Optional[SleepFunc] = None) -> None:
    """Run the whole tour, printing to stdout.

    Each demonstration reports its own ``TourError``; any other error
    propagates to the caller.
    """
    config = config or TourConfig()
    fetcher = UserFetcher(config, sleep=sleep)

    print("=== Python Type Tour ===")

    section("Basic Types")
    types_demo.basic_types()

    section("Array Types")
    types_demo.array_types()

    section("Interfaces")
    user = User(id=1, name="Alice", email="alice@example.com")
    types_demo.handle_user(user)
    admin = Admin(
        id=2,
        name="Bob",
        email="bob@example.com",
        role=Role.ADMIN,
        permissions=["read", "write", "delete"],
    )
    types_demo.handle_admin(admin)

    section("Type Aliases")
    types_demo.process_id(123)
    types_demo.process_id("ABC-789")
    types_demo.update_status(Status.PENDING)

    section("Generics")
    types_demo.generics()

    section("Enums")
    types_demo.enums()

    section("Readonly Types")
    types_demo.readonly_types()

    section("Intersection Types")
    types_demo.describe_person(Person(name="Charlie", age=35))

    section("Conditional Types")
    for value in ("text", 42, 4.2, True):
        print(f"{value!r}: is_string={is_string(value)}, is_number={is_number(value)}")

    section("Async/Await Examples")
    await fetcher.demonstrate_async_await()

    section("Promise Chaining")
    await fetcher.chain_fetch(1)

    section("Retry Logic")
    try:
        user_with_retry = await fetcher.fetch_with_retry(1, config.demo_retries)
        print("User fetched with retry:", user_with_retry)
    except TourError as error:
        print("Failed after retries:", error.message, file=sys.stderr)

    section("Race")
    try:
        fastest = await fetcher.race_multiple_fetches([1, 2, 3])
        print("First user to arrive:", fastest)
    except TourError as error:
        print("Race lost to an error:", error.message, file=sys.stderr)

    section("Result Types")
    for endpoint in ("/users", ""):
        outcome = await fetcher.api_call(endpoint)
        if outcome.success:
            print(f"API call to {endpoint!r} succeeded:", outcome.value)
        else:
            print(f"API call to {endpoint!r} failed:", outcome.error)

    section("Function Overloading")
    print("Combine strings:", combine("Hello", " World"))
    print("Combine numbers:", combine(5, 10))
    try:
        combine("Hello", 5)
    except TourError as error:
        print("Combine mixed:", error.message)

    section("Utilities")
    print("Square of 4:", square(4))
    print("Full name:", full_name("Ada", "Lovelace"))

    print("\n=== All Examples Completed ===")
    logger.info(f"Tour finished after {fetcher.fetch_count} simulated fetches")
