"""User role enumeration."""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration matching the users.role column."""

    EMPLOYEE = "employee"
    REVIEWER = "reviewer"
    ADMIN = "admin"
