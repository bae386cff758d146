"""
Record types used as example payloads throughout the tour.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Protocol, TypeVar

from .enums import Color, Role

T = TypeVar("T")


@dataclass
class User:
    """A user account."""
    id: int
    name: str
    email: str
    age: Optional[int] = None  # Optional property


@dataclass
class Admin(User):
    """A user with a role and a set of permissions."""
    role: Role = Role.ADMIN
    permissions: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ReadonlyUser:
    """A user whose fields cannot be reassigned."""
    id: int
    name: str


@dataclass(frozen=True)
class Point:
    """An immutable 2D point."""
    x: float
    y: float


@dataclass
class HasName:
    name: str


@dataclass
class HasAge:
    age: int


@dataclass
class Person(HasAge, HasName):
    """Both a ``HasName`` and a ``HasAge``: fields are ``name`` then ``age``."""


class Container(Protocol[T]):
    """Anything that holds a single value of type ``T``."""
    value: T

    def get_value(self) -> T:
        ...

    def set_value(self, value: T) -> None:
        ...


class Box(Generic[T]):
    """A ``Container`` tagged with a color."""

    def __init__(self, value: T, color: Color):
        self.value = value
        self._color = color

    def get_value(self) -> T:
        return self.value

    def set_value(self, value: T) -> None:
        self.value = value

    def __repr__(self):
        return f"Box(value={self.value!r}, color={self._color.value})"
