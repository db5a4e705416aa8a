"""Thread-local security context holding the authenticated employee."""

import threading
from typing import TYPE_CHECKING

from rest_framework.exceptions import AuthenticationFailed

if TYPE_CHECKING:
    from core.models import User

_security_context = threading.local()


def set_current_user(user: "User") -> None:
    """Store the authenticated user in thread-local storage.

    Args:
        user: The authenticated User to store.
    """
    _security_context.user = user


def get_current_user() -> "User | None":
    """Retrieve the authenticated user from thread-local storage.

    Returns:
        The current authenticated user, or None if not set.
    """
    return getattr(_security_context, "user", None)


def require_current_user() -> "User":
    """Retrieve the authenticated user or raise an exception.

    Returns:
        The current authenticated user.

    Raises:
        AuthenticationFailed: If no user is set in the security context.
    """
    user = get_current_user()
    if user is None:
        raise AuthenticationFailed("Authentication required")
    return user


def clear_current_user() -> None:
    """Clear the authenticated user after request processing."""
    if hasattr(_security_context, "user"):
        delattr(_security_context, "user")
