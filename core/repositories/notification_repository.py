"""Repository for notification writes and recipient-scoped queries."""

from uuid import UUID

from django.db.models import QuerySet
from django.utils import timezone

from core.models import Notification


class NotificationRepository:
    """Repository for encapsulating notification database queries."""

    @staticmethod
    def insert_one(notification: Notification) -> Notification:
        """Persist a single unsaved notification.

        Args:
            notification: Unsaved Notification instance

        Returns:
            The persisted Notification
        """
        notification.save(force_insert=True)
        return notification

    @staticmethod
    def insert_many(notifications: list[Notification]) -> list[Notification]:
        """Persist several unsaved notifications in one batched insert.

        Args:
            notifications: Unsaved Notification instances

        Returns:
            The persisted Notifications
        """
        return Notification.objects.bulk_create(notifications)

    @staticmethod
    def for_recipient(
        recipient_id: UUID | str,
        is_read: bool | None = None,
    ) -> QuerySet[Notification]:
        """Return a recipient's notifications, newest first.

        Args:
            recipient_id: UUID of the recipient
            is_read: Optional read-state filter

        Returns:
            QuerySet of notifications
        """
        queryset = Notification.objects.select_related("related_idea").filter(
            recipient_id=recipient_id
        )
        if is_read is not None:
            queryset = queryset.filter(is_read=is_read)
        return queryset.order_by("-created_at")

    @staticmethod
    def count_unread(recipient_id: UUID | str) -> int:
        """Count a recipient's unread notifications."""
        return Notification.objects.filter(
            recipient_id=recipient_id, is_read=False
        ).count()

    @staticmethod
    def mark_read(
        notification_id: UUID | str,
        recipient_id: UUID | str,
    ) -> Notification | None:
        """Mark one of a recipient's notifications as read.

        Args:
            notification_id: UUID of the notification
            recipient_id: UUID of the recipient who must own it

        Returns:
            The updated Notification, or None if it does not belong to the
            recipient
        """
        notification = Notification.objects.filter(
            notification_id=notification_id,
            recipient_id=recipient_id,
        ).first()
        if notification is None:
            return None
        notification.is_read = True
        notification.read_at = timezone.now()
        notification.save(update_fields=["is_read", "read_at", "updated_at"])
        return notification

    @staticmethod
    def mark_all_read(recipient_id: UUID | str) -> int:
        """Mark every unread notification of a recipient as read.

        Returns:
            Number of notifications updated
        """
        return Notification.objects.filter(
            recipient_id=recipient_id, is_read=False
        ).update(is_read=True, read_at=timezone.now(), updated_at=timezone.now())
