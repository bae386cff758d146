"""
Same-kind-in, same-kind-out operations and runtime type predicates.
"""

from typing import Any, Union, overload

from .errors import TourError


def is_string(value: Any) -> bool:
    """True when ``value`` is a ``str``."""
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True when ``value`` is an ``int`` or ``float`` (booleans excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@overload
def combine(a: str, b: str) -> str:
    ...


@overload
def combine(a: float, b: float) -> float:
    ...


def combine(a: Union[str, float], b: Union[str, float]) -> Union[str, float]:
    """Concatenate two strings or add two numbers.

    Raises:
        TourError: if the operands are not both strings or both numbers.
    """
    if is_string(a) and is_string(b):
        return f"{a}{b}"
    if is_number(a) and is_number(b):
        return a + b
    raise TourError("Invalid types")
