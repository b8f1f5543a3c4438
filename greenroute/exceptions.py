"""Exception types raised by greenroute."""

from typing import Any, Optional


class GreenRouteError(Exception):
    """Base class for all greenroute errors."""


class ValidationError(GreenRouteError, ValueError):
    """Raised when an input field is malformed or out of range."""

    def __init__(self, field: str, value: Any = None, message: Optional[str] = None):
        self.field = field
        self.value = value
        self.message = message or f"Invalid value for {field}: {value!r}"
        super().__init__(self.message)


class UndefinedImprovement(GreenRouteError, ZeroDivisionError):
    """Raised when a reduction is computed against a zero baseline."""

    def __init__(self, metric: str):
        self.metric = metric
        super().__init__(f"Improvement for '{metric}' is undefined: baseline value is zero")


class AuthenticationError(GreenRouteError):
    """Raised when registration or login is refused."""
