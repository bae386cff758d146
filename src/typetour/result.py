"""
Success/failure outcome types.

A ``Result`` is either a ``Success`` carrying a value or a ``Failure``
carrying an error message. Callers branch on the ``success`` flag, or on the
concrete class.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome."""
    value: T

    success = True


@dataclass(frozen=True)
class Failure:
    """Failed outcome."""
    error: str

    success = False


Result = Union[Success[T], Failure]
