"""Idea lifecycle coordination.

This module provides the IdeaLifecycleService class which sequences every
idea mutation (submit, status change, edit, soft delete) with its secondary
effects:

- credit point recalculation for the idea's submitter
- notification fanout to the affected users
- a live update broadcast to connected clients

The idea write is the primary effect and its failures propagate. Secondary
effects run after the write, each inside its own failure boundary, so one
failing never stops the others or undoes the write.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any
from uuid import UUID

from django.db.models import Count, QuerySet, Sum
from django.utils import timezone

import structlog

from core.constants import EDITABLE_IDEA_FIELDS
from core.enums import IdeaStatus
from core.exceptions import IdeaNotFoundError
from core.models import Idea, User
from core.realtime import LiveUpdateBroadcaster, live_update_broadcaster
from core.repositories import IdeaRepository
from core.services.credit_service import CreditService, credit_service
from core.services.effects import run_best_effort, store_step
from core.services.notification_fanout import (
    NotificationFanoutService,
    notification_fanout,
)

logger = structlog.get_logger(__name__)

DRAFT_FIELDS = (*EDITABLE_IDEA_FIELDS, "status")


class IdeaLifecycleService:
    """Service coordinating idea mutations and their side effects."""

    def __init__(
        self,
        credits: CreditService = credit_service,
        fanout: NotificationFanoutService = notification_fanout,
        broadcaster: LiveUpdateBroadcaster = live_update_broadcaster,
        idea_repository: type[IdeaRepository] = IdeaRepository,
    ) -> None:
        """Initialize idea lifecycle service.

        Args:
            credits: Credit point recalculation service.
            fanout: Notification fanout.
            broadcaster: Live update broadcaster.
            idea_repository: Idea store.
        """
        self.credits = credits
        self.fanout = fanout
        self.broadcaster = broadcaster
        self.ideas = idea_repository

    def submit(
        self,
        draft: Mapping[str, Any],
        submitter: User,
        images: Sequence[Mapping[str, Any]] = (),
    ) -> Idea:
        """Create a new idea for the submitter.

        Args:
            draft: Idea field values (title, problem, improvement, benefit,
                department, and optionally estimated_savings, tags, status).
            submitter: The employee submitting the idea.
            images: Metadata of files the upload handler already stored.

        Returns:
            The persisted idea with its submitter loaded.
        """
        fields = {
            key: draft[key] for key in DRAFT_FIELDS if draft.get(key) is not None
        }
        fields.setdefault("status", IdeaStatus.UNDER_REVIEW.value)

        with store_step("idea_insert"):
            idea = self.ideas.insert(
                **fields,
                images=[dict(image) for image in images],
                submitted_by=submitter,
                submitted_by_employee_number=submitter.employee_number,
            )

        logger.info(
            "idea_submitted",
            idea_id=str(idea.idea_id),
            employee_number=submitter.employee_number,
            department=idea.department,
            image_count=len(idea.images),
        )

        run_best_effort(
            "credit_recalculation",
            self.credits.recalculate,
            submitter.user_id,
            "Idea submitted",
            submitter,
        )
        run_best_effort(
            "idea_submitted_notification",
            self.fanout.notify_idea_submitted,
            idea,
            submitter,
        )
        self._broadcast()

        return idea

    def change_status(
        self,
        idea_id: UUID | str,
        new_status: str,
        reviewer: User,
        review_comments: str | None = None,
        actual_savings: Decimal | None = None,
    ) -> Idea:
        """Move an idea to a new status.

        Any status may follow any other; reviewers can correct mistakes in
        either direction.

        Args:
            idea_id: UUID of the idea.
            new_status: IdeaStatus value to move to.
            reviewer: The reviewer or admin making the change.
            review_comments: Replaces the review comments when given.
            actual_savings: Replaces the actual savings when given.

        Returns:
            The updated idea.

        Raises:
            IdeaNotFoundError: If the idea does not exist.
        """
        new_status = IdeaStatus(new_status).value
        with store_step("idea_lookup"):
            current = self.ideas.find_by_id(idea_id)
        if current is None:
            raise IdeaNotFoundError(str(idea_id))

        now = timezone.now()
        patch: dict[str, Any] = {
            "status": new_status,
            "reviewed_by": reviewer,
            "reviewed_at": now,
        }
        if review_comments is not None:
            patch["review_comments"] = review_comments
        if actual_savings is not None:
            patch["actual_savings"] = actual_savings
        if new_status == IdeaStatus.IMPLEMENTED.value:
            patch["implementation_date"] = now

        with store_step("idea_status_update"):
            idea = self.ideas.update_by_id(idea_id, patch)
        if idea is None:
            raise IdeaNotFoundError(str(idea_id))

        logger.info(
            "idea_status_changed",
            idea_id=str(idea.idea_id),
            previous_status=current.status,
            new_status=new_status,
            reviewer=reviewer.employee_number,
        )

        run_best_effort(
            "credit_recalculation",
            self.credits.recalculate,
            idea.submitted_by_id,
            f"Idea status changed to {new_status}",
            reviewer,
        )
        run_best_effort(
            "idea_status_notification",
            self.fanout.notify_status_change,
            idea,
            new_status,
            reviewer,
            current.status,
        )
        self._broadcast()

        return idea

    def edit(
        self,
        idea_id: UUID | str,
        updates: Mapping[str, Any],
        editor: User,
    ) -> Idea:
        """Update the editable fields of an idea the editor owns.

        Keys outside the editable field set are ignored. Credit points are
        not recalculated since the status cannot change here.

        Args:
            idea_id: UUID of the idea.
            updates: Field names mapped to new values.
            editor: The user making the edit.

        Returns:
            The updated idea.

        Raises:
            IdeaNotFoundError: If the idea does not exist, is soft-deleted or
                is not owned by the editor.
        """
        patch = {key: updates[key] for key in EDITABLE_IDEA_FIELDS if key in updates}

        with store_step("idea_update"):
            idea = self.ideas.update_where_owned_by(idea_id, editor.user_id, patch)
        if idea is None:
            logger.warning(
                "idea_edit_rejected",
                idea_id=str(idea_id),
                employee_number=editor.employee_number,
            )
            raise IdeaNotFoundError(str(idea_id))

        logger.info(
            "idea_edited",
            idea_id=str(idea.idea_id),
            updated_fields=sorted(patch),
        )

        if idea.submitted_by_id != editor.user_id:
            run_best_effort(
                "idea_updated_notification",
                self.fanout.notify_idea_updated,
                idea,
                patch,
                editor,
            )
        self._broadcast()

        return idea

    def soft_delete(self, idea_id: UUID | str, requester: User) -> None:
        """Mark an idea the requester owns as inactive.

        Args:
            idea_id: UUID of the idea.
            requester: The user deleting the idea.

        Raises:
            IdeaNotFoundError: If the idea does not exist, is already
                deleted or is not owned by the requester.
        """
        with store_step("idea_soft_delete"):
            idea = self.ideas.update_where_owned_by(
                idea_id, requester.user_id, {"is_active": False}
            )
        if idea is None:
            logger.warning(
                "idea_delete_rejected",
                idea_id=str(idea_id),
                employee_number=requester.employee_number,
            )
            raise IdeaNotFoundError(str(idea_id))

        logger.info("idea_deleted", idea_id=str(idea.idea_id))

        run_best_effort(
            "credit_recalculation",
            self.credits.recalculate,
            requester.user_id,
            "Idea deleted",
            requester,
        )
        self._broadcast()

    def list_ideas(
        self,
        status: str | None = None,
        department: str | None = None,
        benefit: str | None = None,
        submitted_by: str | None = None,
        search: str | None = None,
    ) -> QuerySet[Idea]:
        """List active ideas, newest first.

        Args:
            status: Only ideas with this status.
            department: Only ideas from this department.
            benefit: Only ideas with this benefit category.
            submitted_by: Only ideas of this employee number.
            search: Case-insensitive text in title, problem or improvement.

        Returns:
            QuerySet of matching ideas.
        """
        return self.ideas.search(
            status=status,
            department=department,
            benefit=benefit,
            submitted_by_employee_number=submitted_by,
            search=search,
        )

    def list_my_ideas(self, user: User, status: str | None = None) -> QuerySet[Idea]:
        """List a user's own active ideas, newest first."""
        return self.ideas.search(status=status, submitted_by_id=user.user_id)

    def get_idea(self, idea_id: UUID | str) -> Idea:
        """Get an active idea.

        Raises:
            IdeaNotFoundError: If the idea does not exist or is soft-deleted.
        """
        idea = self.ideas.find_active_by_id(idea_id)
        if idea is None:
            raise IdeaNotFoundError(str(idea_id))
        return idea

    def get_idea_stats(self) -> dict[str, list[dict[str, Any]]]:
        """Aggregate active ideas by status, department and benefit.

        Returns:
            Dict with ``status`` and ``department`` lists of
            ``{key, count, total_savings}`` and a ``benefit`` list of
            ``{key, count}``.
        """
        active = self.ideas.search()

        def grouped(field: str, with_savings: bool) -> list[dict[str, Any]]:
            annotations: dict[str, Any] = {"count": Count("idea_id")}
            if with_savings:
                annotations["total_savings"] = Sum("estimated_savings")
            rows = active.order_by().values(field).annotate(**annotations)
            result = []
            for row in rows.order_by(field):
                entry = {"key": row[field], "count": row["count"]}
                if with_savings:
                    entry["total_savings"] = row["total_savings"] or Decimal("0")
                result.append(entry)
            return result

        return {
            "status": grouped("status", with_savings=True),
            "department": grouped("department", with_savings=True),
            "benefit": grouped("benefit", with_savings=False),
        }

    def _broadcast(self) -> None:
        run_best_effort(
            "live_update_broadcast",
            self.broadcaster.broadcast_ideas_changed,
        )


idea_lifecycle_service = IdeaLifecycleService()
