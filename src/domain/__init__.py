"""Domain layer: constants, errors and schemas."""

from .errors import ErrorCodes, RouteIndexError
from .schemas import PageRoute, RouteCache

__all__ = [
    "ErrorCodes",
    "RouteIndexError",
    "PageRoute",
    "RouteCache",
]
