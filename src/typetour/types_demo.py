"""
Synchronous demonstrations of the type system.

Each function prints what it is showing; the ones that compute something
also return it so the behaviour can be checked without parsing output.
"""

import dataclasses
from typing import List, Optional, Tuple, TypeVar, Union

from .enums import Color, Direction, Status
from .models import Admin, Box, Person, Point, ReadonlyUser, User

T = TypeVar("T")
U = TypeVar("U")
UserT = TypeVar("UserT", bound=User)

ID = Union[int, str]


def basic_types() -> None:
    name: str = "Ahmed"
    age: int = 33
    is_student: bool = True
    anything: object = "this can be anything"

    print(f"Name: {name}, Age: {age}, Student: {is_student}, anything: {anything}")


def array_types() -> None:
    numbers: List[int] = [1, 2, 3, 4, 5]
    strings: List[str] = ["hello", "world"]
    mixed: List[Union[str, int]] = [1, "two", 3, "four"]
    record: Tuple[str, int, bool] = ("test", 42, True)

    print("Numbers:", numbers)
    print("Strings:", strings)
    print("Mixed:", mixed)
    print("Tuple:", record)


def handle_user(user: User) -> None:
    print(f"User: {user.name} ({user.email})")
    if user.age:
        print(f"Age: {user.age}")


def handle_admin(admin: Admin) -> None:
    print(f"Admin: {admin.name}, Role: {admin.role.value}")
    print(f"Permissions: {', '.join(admin.permissions)}")


def process_id(id: ID) -> None:
    print(f"Processing ID: {id}")


def update_status(status: Status) -> None:
    print(f"Status updated to: {status.value}")


def get_first_element(items: List[T]) -> Optional[T]:
    """Return the first item, or None for an empty list."""
    return items[0] if items else None


def log_user_by_id(user: UserT) -> UserT:
    """Print the id of any ``User`` subtype and hand the same object back."""
    print(f"User ID: {user.id}")
    return user


def swap_pair(pair: Tuple[T, U]) -> Tuple[U, T]:
    return pair[1], pair[0]


def print_color(color: Color) -> None:
    print(f"Selected color: {color.value}")


def describe_person(person: Person) -> str:
    description = f"{person.name} is {person.age} years old"
    print(description)
    return description


def readonly_types() -> bool:
    """Show that frozen records refuse assignment.

    Returns True when both assignments were rejected.
    """
    user = ReadonlyUser(id=7, name="Dana")
    point = Point(x=1.0, y=2.0)
    print("Readonly user:", user)
    print("Point:", point)

    rejected = 0
    for record, attribute in ((user, "name"), (point, "x")):
        try:
            setattr(record, attribute, None)
        except dataclasses.FrozenInstanceError:
            print(f"Cannot assign to '{attribute}' of {type(record).__name__}")
            rejected += 1
    return rejected == 2


def generics() -> None:
    first_num = get_first_element([1, 2, 3])
    print("First element:", first_num)

    swapped = swap_pair((5, "ten"))
    print("Swapped pair:", swapped)

    box = Box(42, Color.GREEN)
    print("Box value:", box.get_value())

    log_user_by_id(Admin(id=9, name="Eve", email="eve@example.com"))


def enums() -> None:
    print_color(Color.RED)
    print("Direction Up:", Direction.UP.value)
