"""Credit point recalculation service.

This module provides the CreditService class, the only writer of
``User.credit_points``. A recalculation locks the user row, rescores the
user's active ideas and persists the result. The stored value is
overwritten on every call, so repeating a recalculation always converges.
"""

from dataclasses import dataclass
from uuid import UUID

from django.db import transaction

import structlog

from core.exceptions import UserNotFoundError
from core.models import User
from core.repositories import IdeaRepository, UserRepository
from core.services.effects import run_best_effort, store_step
from core.services.notification_fanout import (
    NotificationFanoutService,
    notification_fanout,
)
from core.services.score_calculator import score_breakdown

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreditRecalculationResult:
    """Outcome of a single recalculation."""

    user: User
    old_points: int
    new_points: int

    @property
    def changed(self) -> bool:
        """Whether the stored credit points changed."""
        return self.old_points != self.new_points

    @property
    def difference(self) -> int:
        """Signed change in credit points."""
        return self.new_points - self.old_points


class CreditService:
    """Service recomputing and persisting users' credit points."""

    def __init__(
        self,
        fanout: NotificationFanoutService = notification_fanout,
        idea_repository: type[IdeaRepository] = IdeaRepository,
        user_repository: type[UserRepository] = UserRepository,
    ) -> None:
        """Initialize credit service.

        Args:
            fanout: Notification fanout used for credit_points_updated events.
            idea_repository: Idea store.
            user_repository: User store.
        """
        self.fanout = fanout
        self.ideas = idea_repository
        self.users = user_repository

    def recalculate(
        self,
        user_id: UUID | str,
        reason: str,
        actor: User | None = None,
    ) -> CreditRecalculationResult:
        """Recompute a user's credit points from their active ideas.

        The user row stays locked from before the ideas are read until the
        new value is written, so concurrent recalculations for the same user
        run one after another and the last writer always saw every
        committed idea change.

        Args:
            user_id: UUID of the user to rescore.
            reason: Human-readable reason, included in the notification.
            actor: User whose action triggered the recalculation.

        Returns:
            CreditRecalculationResult with the old and new values.

        Raises:
            UserNotFoundError: If the user does not exist. Nothing is written.
        """
        with store_step("credit_points_update"), transaction.atomic():
            user = self.users.find_by_id_for_update(user_id)
            if user is None:
                logger.warning(
                    "credit_recalculation_user_not_found", user_id=str(user_id)
                )
                raise UserNotFoundError(str(user_id))

            old_points = user.credit_points
            breakdown = score_breakdown(self.ideas.find_active_by_submitter(user_id))
            new_points = breakdown.total

            user = self.users.update_credit_points(user_id, new_points)

        result = CreditRecalculationResult(
            user=user, old_points=old_points, new_points=new_points
        )

        logger.info(
            "credit_points_recalculated",
            user_id=str(user_id),
            employee_number=user.employee_number,
            old_points=old_points,
            new_points=new_points,
            idea_count=breakdown.idea_count,
            implemented_count=breakdown.implemented,
            approved_count=breakdown.approved,
            other_count=breakdown.other,
            reason=reason,
        )

        if result.changed:
            run_best_effort(
                "credit_points_notification",
                self.fanout.notify_credit_points_updated,
                user,
                old_points,
                new_points,
                reason,
                actor,
            )

        return result

    def recalculate_all(self, reason: str, actor: User | None = None) -> int:
        """Recalculate credit points for every user.

        A failure for one user is logged and the run moves on to the next.

        Args:
            reason: Human-readable reason, included in notifications.
            actor: User who requested the reconciliation, if any.

        Returns:
            Number of users whose credit points changed.
        """
        changed = 0
        failed = 0
        total = 0
        for user in self.users.find_all():
            total += 1
            try:
                result = self.recalculate(user.user_id, reason, actor)
            except Exception as e:
                failed += 1
                logger.exception(
                    "credit_recalculation_failed",
                    user_id=str(user.user_id),
                    error=str(e),
                )
                continue
            if result.changed:
                changed += 1

        logger.info(
            "credit_points_reconciled",
            user_count=total,
            changed_count=changed,
            failed_count=failed,
            reason=reason,
        )
        return changed


credit_service = CreditService()
