"""Notification model for user-facing notification data.

Notifications are written exclusively by the notification fanout. After
creation only the read flag and read timestamp change.
"""

import uuid
from typing import ClassVar

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from core.enums import NotificationPriority, NotificationType


class Notification(models.Model):
    """In-app notification delivered to a single recipient.

    Attributes:
        notification_id: Unique identifier for the notification.
        recipient: The user receiving this notification.
        recipient_employee_number: Copy of the recipient's employee number.
        type: NotificationType value.
        title: Server-generated title.
        message: Server-generated message body.
        related_idea: Idea the event concerns, if any.
        related_user: User whose action caused the event, if any.
        metadata: Free-form event context (old/new points, idea title, ...).
        is_read: Whether the recipient has read the notification.
        read_at: When the notification was marked as read.
        priority: low, medium or high.
        created_at: When the notification was created.
        updated_at: When the notification was last updated.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    recipient = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="notifications",
        db_column="recipient_id",
        help_text="User receiving the notification",
    )
    recipient_employee_number = models.CharField(
        max_length=50,
        help_text="Employee number of the recipient",
    )
    type = models.CharField(
        max_length=30,
        choices=[(t.value, t.value) for t in NotificationType],
        help_text="Notification type determining the rendered template",
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    related_idea = models.ForeignKey(
        "core.Idea",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications",
        db_column="related_idea_id",
    )
    related_user = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="caused_notifications",
        db_column="related_user_id",
    )
    metadata = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    is_read = models.BooleanField(
        default=False,
        help_text="Whether the notification has been read by the recipient",
    )
    read_at = models.DateTimeField(null=True, blank=True)
    priority = models.CharField(
        max_length=10,
        choices=[(p.value, p.value) for p in NotificationPriority],
        default=NotificationPriority.MEDIUM.value,
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the notification was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the notification was last updated",
    )

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["recipient", "is_read"]),
            models.Index(fields=["recipient_employee_number"]),
            models.Index(fields=["-created_at"]),
            models.Index(fields=["type"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.type} for user {self.recipient_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.type}, "
            f"recipient={self.recipient_id}, "
            f"is_read={self.is_read})>"
        )
