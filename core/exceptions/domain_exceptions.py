"""Domain exceptions raised by the idea service core."""


class IdeaServiceError(Exception):
    """Base exception for idea service errors."""

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize idea service error.

        Args:
            message: Error message
            status_code: HTTP status code the API layer should use
        """
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(IdeaServiceError):
    """A referenced record does not resolve (404)."""

    def __init__(self, message: str):
        """Initialize not found error.

        Args:
            message: Error message
        """
        super().__init__(message=message, status_code=404)


class IdeaNotFoundError(NotFoundError):
    """Idea not found, or not owned by the requesting user.

    Edit and delete report both cases with this one exception so callers
    cannot learn whether an idea they do not own exists.
    """

    def __init__(self, idea_id: str):
        """Initialize idea not found error.

        Args:
            idea_id: ID of the idea that was not found
        """
        self.idea_id = idea_id
        super().__init__(message=f"Idea with ID {idea_id} not found")


class UserNotFoundError(NotFoundError):
    """User not found (404)."""

    def __init__(self, user_id: str):
        """Initialize user not found error.

        Args:
            user_id: ID of the user that was not found
        """
        self.user_id = user_id
        super().__init__(message=f"User with ID {user_id} not found")


class NotificationNotFoundError(NotFoundError):
    """Notification not found for the requesting recipient (404)."""

    def __init__(self, notification_id: str):
        """Initialize notification not found error.

        Args:
            notification_id: ID of the notification that was not found
        """
        self.notification_id = notification_id
        super().__init__(message=f"Notification with ID {notification_id} not found")


class DependencyFailureError(IdeaServiceError):
    """A store call on the primary path of an operation failed (503)."""

    def __init__(self, step: str, message: str | None = None):
        """Initialize dependency failure error.

        Args:
            step: Name of the step that failed (e.g. "idea_insert")
            message: Optional custom error message
        """
        self.step = step
        super().__init__(
            message=message or f"Dependency failure during {step}",
            status_code=503,
        )


class ConflictError(IdeaServiceError):
    """The request conflicts with existing data (409)."""

    def __init__(self, message: str, detail: str | None = None):
        """Initialize conflict error.

        Args:
            message: Error message
            detail: Additional details about the conflict
        """
        self.detail = detail
        super().__init__(message=message, status_code=409)
