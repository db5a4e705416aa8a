"""Repository for idea database queries."""

from typing import Any
from uuid import UUID

from django.db.models import Q, QuerySet
from django.utils import timezone

from core.models import Idea


class IdeaRepository:
    """Repository for encapsulating idea database queries.

    Every listing and scoring query filters on ``is_active=True``; soft
    deleted ideas stay in the table but are otherwise invisible.
    """

    @staticmethod
    def find_active_by_submitter(user_id: UUID | str) -> list[Idea]:
        """Return all active ideas submitted by a user.

        Args:
            user_id: UUID of the submitter

        Returns:
            List of the user's active ideas, any status
        """
        return list(Idea.objects.filter(submitted_by_id=user_id, is_active=True))

    @staticmethod
    def find_by_id(idea_id: UUID | str) -> Idea | None:
        """Look up an idea by primary key, including soft-deleted ones.

        Args:
            idea_id: UUID of the idea

        Returns:
            The Idea, or None if it does not exist
        """
        return (
            Idea.objects.select_related("submitted_by")
            .filter(idea_id=idea_id)
            .first()
        )

    @staticmethod
    def find_active_by_id(idea_id: UUID | str) -> Idea | None:
        """Look up an active idea by primary key.

        Args:
            idea_id: UUID of the idea

        Returns:
            The Idea, or None if it does not exist or was soft-deleted
        """
        return (
            Idea.objects.select_related("submitted_by", "reviewed_by")
            .filter(idea_id=idea_id, is_active=True)
            .first()
        )

    @staticmethod
    def insert(**fields: Any) -> Idea:
        """Create and persist a new idea.

        Args:
            **fields: Idea model field values

        Returns:
            The persisted Idea
        """
        return Idea.objects.create(**fields)

    @staticmethod
    def update_by_id(idea_id: UUID | str, patch: dict[str, Any]) -> Idea | None:
        """Apply a field patch to an idea.

        Args:
            idea_id: UUID of the idea
            patch: Field names mapped to new values

        Returns:
            The updated Idea, or None if it does not exist
        """
        updated = Idea.objects.filter(idea_id=idea_id).update(
            **patch, updated_at=timezone.now()
        )
        if not updated:
            return None
        return IdeaRepository.find_by_id(idea_id)

    @staticmethod
    def update_where_owned_by(
        idea_id: UUID | str,
        user_id: UUID | str,
        patch: dict[str, Any],
    ) -> Idea | None:
        """Apply a field patch only if the idea is active and owned by a user.

        Existence and ownership are checked by the same UPDATE predicate, so
        a missing idea and an idea owned by someone else both return None.

        Args:
            idea_id: UUID of the idea
            user_id: UUID of the user who must own the idea
            patch: Field names mapped to new values

        Returns:
            The updated Idea, or None if no active idea matched
        """
        updated = Idea.objects.filter(
            idea_id=idea_id,
            submitted_by_id=user_id,
            is_active=True,
        ).update(**patch, updated_at=timezone.now())
        if not updated:
            return None
        return IdeaRepository.find_by_id(idea_id)

    @staticmethod
    def search(
        status: str | None = None,
        department: str | None = None,
        benefit: str | None = None,
        submitted_by_employee_number: str | None = None,
        submitted_by_id: UUID | str | None = None,
        search: str | None = None,
    ) -> QuerySet[Idea]:
        """Build a filtered queryset of active ideas, newest first.

        Args:
            status: Only ideas with this status
            department: Only ideas from this department
            benefit: Only ideas with this benefit category
            submitted_by_employee_number: Only ideas of this employee
            submitted_by_id: Only ideas of this user
            search: Case-insensitive text matched against title, problem
                and improvement

        Returns:
            QuerySet of matching active ideas
        """
        queryset = Idea.objects.select_related("submitted_by", "reviewed_by").filter(
            is_active=True
        )

        if status:
            queryset = queryset.filter(status=status)
        if department:
            queryset = queryset.filter(department=department)
        if benefit:
            queryset = queryset.filter(benefit=benefit)
        if submitted_by_employee_number:
            queryset = queryset.filter(
                submitted_by_employee_number=submitted_by_employee_number
            )
        if submitted_by_id:
            queryset = queryset.filter(submitted_by_id=submitted_by_id)
        if search:
            queryset = queryset.filter(
                Q(title__icontains=search)
                | Q(problem__icontains=search)
                | Q(improvement__icontains=search)
            )

        return queryset.order_by("-created_at")
