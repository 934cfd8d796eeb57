"""
Application error hierarchy.

Every error the service raises on purpose is one of these classes. The
boundary handlers in main.py translate them to HTTP responses, so the
repository and endpoint layers never build responses for failures themselves.
"""

from typing import List, Union


class AppError(Exception):
    """Base class for errors that map to an HTTP status."""

    status_code: int = 500

    def __init__(self, message: Union[str, List[str]] = "Internal Server Error") -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(AppError):
    """Raised when input fails validation or an update carries no fields."""

    status_code = 400

    def __init__(self, message: Union[str, List[str]] = "Bad Request") -> None:
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when no row matches the requested id."""

    status_code = 404

    def __init__(self, message: Union[str, List[str]] = "Not Found") -> None:
        super().__init__(message)


class UnauthorizedError(AppError):
    """Raised when the caller lacks the role an endpoint requires."""

    status_code = 401

    def __init__(self, message: Union[str, List[str]] = "Unauthorized") -> None:
        super().__init__(message)
