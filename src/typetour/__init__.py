# src/typetour/__init__.py
"""
typetour: a tour of static typing and asynchronous patterns
Small, runnable demonstrations of typed records, generics, enums and
async fetch/retry/race helpers.
"""

__version__ = "0.1.0"

from .enums import Color, Direction, Role, Status
from .config import TourConfig
from .errors import TourError
from .models import Admin, Box, Container, HasAge, HasName, Person, Point, ReadonlyUser, User
from .result import Failure, Result, Success
from .retry import retry_async
from .fetcher import UserFetcher
from .overloads import combine, is_number, is_string
from .utils import full_name, square
from .runner import run_examples

__all__ = [
    "Admin",
    "Box",
    "Color",
    "Container",
    "Direction",
    "Failure",
    "HasAge",
    "HasName",
    "Person",
    "Point",
    "ReadonlyUser",
    "Result",
    "Role",
    "Status",
    "Success",
    "TourConfig",
    "TourError",
    "User",
    "UserFetcher",
    "combine",
    "full_name",
    "is_number",
    "is_string",
    "retry_async",
    "run_examples",
    "square",
]
