"""Exception handling utilities for the idea service."""

from core.exceptions.domain_exceptions import (
    ConflictError,
    DependencyFailureError,
    IdeaNotFoundError,
    IdeaServiceError,
    NotFoundError,
    NotificationNotFoundError,
    UserNotFoundError,
)
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "ConflictError",
    "DependencyFailureError",
    "IdeaNotFoundError",
    "IdeaServiceError",
    "NotFoundError",
    "NotificationNotFoundError",
    "UserNotFoundError",
    "custom_exception_handler",
]
