"""Service for recipient-facing notification management.

This module provides the UserNotificationService class which lets a user
list their notifications and mark them as read. Every operation is scoped
to the given recipient; a notification belonging to someone else behaves
exactly like one that does not exist.
"""

from uuid import UUID

from django.db.models import QuerySet

import structlog

from core.exceptions import NotificationNotFoundError
from core.models import Notification, User
from core.repositories import NotificationRepository

logger = structlog.get_logger(__name__)


class UserNotificationService:
    """Service for a recipient's own notifications."""

    def __init__(
        self,
        notification_repository: type[NotificationRepository] = NotificationRepository,
    ) -> None:
        self.notifications = notification_repository

    def list_notifications(
        self,
        user: User,
        is_read: bool | None = None,
    ) -> QuerySet[Notification]:
        """Get a user's notifications, newest first.

        Args:
            user: The recipient.
            is_read: Optional read-state filter.

        Returns:
            QuerySet of the user's notifications.
        """
        logger.info(
            "list_user_notifications",
            user_id=str(user.user_id),
            is_read=is_read,
        )
        return self.notifications.for_recipient(user.user_id, is_read=is_read)

    def unread_count(self, user: User) -> int:
        """Count a user's unread notifications."""
        return self.notifications.count_unread(user.user_id)

    def mark_as_read(self, notification_id: UUID | str, user: User) -> Notification:
        """Mark one of a user's notifications as read.

        Args:
            notification_id: UUID of the notification.
            user: The recipient.

        Returns:
            The updated notification.

        Raises:
            NotificationNotFoundError: If the notification does not exist or
                belongs to another user.
        """
        notification = self.notifications.mark_read(notification_id, user.user_id)
        if notification is None:
            logger.warning(
                "notification_not_found_for_recipient",
                notification_id=str(notification_id),
                user_id=str(user.user_id),
            )
            raise NotificationNotFoundError(str(notification_id))

        logger.info(
            "notification_marked_read",
            notification_id=str(notification_id),
            user_id=str(user.user_id),
        )
        return notification

    def mark_all_as_read(self, user: User) -> int:
        """Mark every unread notification of a user as read.

        Returns:
            Number of notifications updated.
        """
        updated = self.notifications.mark_all_read(user.user_id)
        logger.info(
            "notifications_marked_read",
            user_id=str(user.user_id),
            updated_count=updated,
        )
        return updated


user_notification_service = UserNotificationService()
