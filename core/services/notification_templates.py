"""Title and message templates for notification types.

Titles and messages are always generated server-side from these templates
and the event context; they are never taken from user input.
"""

from typing import Any, TypedDict

import structlog

from core.enums import NotificationPriority, NotificationType

logger = structlog.get_logger(__name__)


class NotificationTemplate(TypedDict):
    """Configuration for a notification template."""

    title: str
    message: str
    priority: NotificationPriority


NOTIFICATION_TEMPLATES: dict[NotificationType, NotificationTemplate] = {
    # Idea lifecycle events
    NotificationType.IDEA_SUBMITTED: {
        "title": "New Idea Submitted",
        "message": '{submitter_name} submitted a new idea: "{idea_title}"',
        "priority": NotificationPriority.HIGH,
    },
    NotificationType.IDEA_UNDER_REVIEW: {
        "title": "Idea Under Review",
        "message": 'Your idea "{idea_title}" is under review',
        "priority": NotificationPriority.MEDIUM,
    },
    NotificationType.IDEA_APPROVED: {
        "title": "Idea Approved",
        "message": (
            'Your idea "{idea_title}" has been approved and is under '
            "consideration for implementation"
        ),
        "priority": NotificationPriority.MEDIUM,
    },
    NotificationType.IDEA_REJECTED: {
        "title": "Idea Rejected",
        "message": (
            'Your idea "{idea_title}" has been reviewed but not approved '
            "at this time"
        ),
        "priority": NotificationPriority.MEDIUM,
    },
    NotificationType.IDEA_IMPLEMENTING: {
        "title": "Idea Implementing",
        "message": 'Your idea "{idea_title}" is now being implemented!',
        "priority": NotificationPriority.MEDIUM,
    },
    NotificationType.IDEA_IMPLEMENTED: {
        "title": "Idea Implemented",
        "message": (
            'Congratulations! Your idea "{idea_title}" has been successfully '
            "implemented"
        ),
        "priority": NotificationPriority.HIGH,
    },
    NotificationType.IDEA_UPDATED: {
        "title": "Idea Updated",
        "message": 'Your idea "{idea_title}" has been updated. Changes: {changes}',
        "priority": NotificationPriority.MEDIUM,
    },
    # Scoring events
    NotificationType.CREDIT_POINTS_UPDATED: {
        "title": "Credit Points Updated",
        "message": (
            "Your credit points have been {direction} to {new_points} points. "
            "{reason}"
        ),
        "priority": NotificationPriority.MEDIUM,
    },
}


def get_notification_template(
    notification_type: NotificationType,
) -> NotificationTemplate:
    """Get the template for a notification type.

    Args:
        notification_type: The notification type.

    Returns:
        NotificationTemplate with title, message and default priority.

    Raises:
        KeyError: If the type has no template.
    """
    return NOTIFICATION_TEMPLATES[notification_type]


def render_notification(
    notification_type: NotificationType,
    context: dict[str, Any],
) -> tuple[str, str]:
    """Render the title and message for a notification.

    A message placeholder missing from ``context`` falls back to the raw
    message template rather than failing the notification.

    Args:
        notification_type: The notification type.
        context: Template parameters.

    Returns:
        Tuple of (title, message).
    """
    template = get_notification_template(notification_type)
    try:
        message = template["message"].format(**context)
    except KeyError as e:
        logger.warning(
            "notification_template_missing_key",
            notification_type=notification_type.value,
            missing_key=str(e),
        )
        message = template["message"]
    return template["title"], message.strip()
