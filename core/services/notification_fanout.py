"""Notification fanout for idea and credit point events.

This module provides the NotificationFanoutService class, the only writer of
Notification records. It builds one notification per recipient from the
template registry and persists them in a single batched insert.

Fanout is best-effort: every failure (empty recipient lookup, template
rendering, store write) is logged and suppressed so the business operation
that triggered the event always completes.
"""

from collections.abc import Sequence
from typing import Any

import structlog

from core.enums import NotificationPriority, NotificationType, UserRole
from core.models import Idea, Notification, User
from core.repositories import NotificationRepository, UserRepository
from core.services.notification_templates import (
    get_notification_template,
    render_notification,
)

logger = structlog.get_logger(__name__)

REVIEWER_ROLES = (UserRole.ADMIN.value, UserRole.REVIEWER.value)


class NotificationFanoutService:
    """Service creating notifications for idea lifecycle and scoring events."""

    def __init__(
        self,
        notification_repository: type[NotificationRepository] = NotificationRepository,
        user_repository: type[UserRepository] = UserRepository,
    ) -> None:
        """Initialize notification fanout.

        Args:
            notification_repository: Notification store.
            user_repository: User store used to resolve reviewer recipients.
        """
        self.notifications = notification_repository
        self.users = user_repository

    def notify(
        self,
        notification_type: NotificationType,
        recipients: Sequence[User],
        actor: User | None = None,
        idea: Idea | None = None,
        context: dict[str, Any] | None = None,
        priority: NotificationPriority | None = None,
    ) -> list[Notification]:
        """Create one notification per recipient for a single event.

        Args:
            notification_type: Type selecting the title/message template.
            recipients: Users to notify. Empty is a no-op.
            actor: User whose action caused the event.
            idea: Idea the event concerns.
            context: Template parameters, also stored as metadata.
            priority: Overrides the template's default priority.

        Returns:
            The persisted notifications; empty if nothing was created.
        """
        context = context or {}

        if not recipients:
            logger.info(
                "notification_fanout_no_recipients",
                notification_type=notification_type.value,
                idea_id=str(idea.idea_id) if idea else None,
            )
            return []

        try:
            return self._fanout(
                notification_type, recipients, actor, idea, context, priority
            )
        except Exception as e:
            logger.exception(
                "notification_fanout_failed",
                notification_type=notification_type.value,
                recipient_count=len(recipients),
                error=str(e),
            )
            return []

    def _fanout(
        self,
        notification_type: NotificationType,
        recipients: Sequence[User],
        actor: User | None,
        idea: Idea | None,
        context: dict[str, Any],
        priority: NotificationPriority | None,
    ) -> list[Notification]:
        title, message = render_notification(notification_type, context)
        priority = priority or get_notification_template(notification_type)[
            "priority"
        ]

        pending = []
        for recipient in recipients:
            try:
                pending.append(
                    Notification(
                        recipient=recipient,
                        recipient_employee_number=recipient.employee_number,
                        type=notification_type.value,
                        title=title,
                        message=message,
                        related_idea=idea,
                        related_user=actor,
                        metadata=dict(context),
                        priority=NotificationPriority(priority).value,
                    )
                )
            except Exception as e:
                logger.exception(
                    "notification_build_failed",
                    notification_type=notification_type.value,
                    recipient_id=str(getattr(recipient, "user_id", None)),
                    error=str(e),
                )

        if not pending:
            return []

        if len(pending) == 1:
            created = [self.notifications.insert_one(pending[0])]
        else:
            created = self.notifications.insert_many(pending)

        logger.info(
            "notifications_created",
            notification_type=notification_type.value,
            created_count=len(created),
            idea_id=str(idea.idea_id) if idea else None,
        )
        return created

    def notify_idea_submitted(self, idea: Idea, submitter: User) -> list[Notification]:
        """Notify every active admin and reviewer about a new idea.

        Args:
            idea: The newly submitted idea.
            submitter: The employee who submitted it.

        Returns:
            The created notifications.
        """
        try:
            reviewers = self.users.find_active_by_roles(REVIEWER_ROLES)
        except Exception as e:
            logger.exception(
                "notification_recipient_lookup_failed",
                notification_type=NotificationType.IDEA_SUBMITTED.value,
                error=str(e),
            )
            return []

        return self.notify(
            NotificationType.IDEA_SUBMITTED,
            recipients=reviewers,
            actor=submitter,
            idea=idea,
            context={
                "idea_title": idea.title,
                "submitter_name": submitter.name,
                "department": idea.department or submitter.department,
            },
        )

    def notify_status_change(
        self,
        idea: Idea,
        new_status: str,
        reviewer: User,
        previous_status: str | None = None,
    ) -> list[Notification]:
        """Notify the submitter that their idea's status changed.

        Args:
            idea: The idea whose status changed.
            new_status: IdeaStatus value the idea was moved to.
            reviewer: The reviewer who changed the status.
            previous_status: Status before the change.

        Returns:
            The created notification, as a one-element list.
        """
        try:
            notification_type = NotificationType.for_status(new_status)
        except ValueError:
            logger.warning("notification_type_unknown_status", status=new_status)
            return []

        return self.notify(
            notification_type,
            recipients=[idea.submitted_by],
            actor=reviewer,
            idea=idea,
            context={
                "idea_title": idea.title,
                "previous_status": previous_status,
                "new_status": new_status,
                "reviewer_name": reviewer.name,
            },
        )

    def notify_credit_points_updated(
        self,
        user: User,
        old_points: int,
        new_points: int,
        reason: str,
        actor: User | None = None,
    ) -> list[Notification]:
        """Tell a user their credit points changed.

        Args:
            user: The user whose points changed.
            old_points: Points before recalculation.
            new_points: Points after recalculation.
            reason: Human-readable reason for the recalculation.
            actor: User whose action triggered the recalculation.

        Returns:
            The created notification, as a one-element list.
        """
        difference = new_points - old_points
        return self.notify(
            NotificationType.CREDIT_POINTS_UPDATED,
            recipients=[user],
            actor=actor or user,
            context={
                "old_points": old_points,
                "new_points": new_points,
                "points_difference": difference,
                "direction": "increased" if difference > 0 else "updated",
                "reason": reason,
            },
        )

    def notify_idea_updated(
        self,
        idea: Idea,
        updated_fields: dict[str, Any],
        editor: User,
    ) -> list[Notification]:
        """Tell the submitter that someone else edited their idea.

        Args:
            idea: The edited idea.
            updated_fields: Field names mapped to their new values.
            editor: The user who made the edit.

        Returns:
            The created notification, as a one-element list.
        """
        return self.notify(
            NotificationType.IDEA_UPDATED,
            recipients=[idea.submitted_by],
            actor=editor,
            idea=idea,
            context={
                "idea_title": idea.title,
                "changes": ", ".join(updated_fields),
                "updated_fields": updated_fields,
                "updater_name": editor.name,
            },
        )


notification_fanout = NotificationFanoutService()
