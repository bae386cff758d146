"""
Small helpers exported for reuse outside the tour.
"""


def square(num: float) -> float:
    """Return ``num`` multiplied by itself."""
    return num * num


def full_name(first_name: str, last_name: str) -> str:
    """Join a first and last name with a single space."""
    return f"{first_name} {last_name}"
