"""Individual and department leaderboards.

The individual board ranks employees by their cached credit points. The
department board is computed from active ideas using the same single-tier
scoring as credit recalculation.
"""

from decimal import Decimal
from typing import Any

from django.db.models import Count, Q, Sum

import structlog

from core.constants import INDIVIDUAL_LEADERBOARD_LIMIT
from core.enums import IdeaStatus
from core.models import Idea, User
from core.services.score_calculator import ScoreBreakdown

logger = structlog.get_logger(__name__)


class LeaderboardService:
    """Service computing leaderboard rankings."""

    def individual(
        self, limit: int = INDIVIDUAL_LEADERBOARD_LIMIT
    ) -> list[dict[str, Any]]:
        """Rank active employees by credit points.

        Args:
            limit: Maximum number of entries.

        Returns:
            Entries with rank, user fields, credit points and active idea
            count, highest credit points first.
        """
        users = (
            User.objects.filter(is_active=True)
            .annotate(idea_count=Count("ideas", filter=Q(ideas__is_active=True)))
            .order_by("-credit_points", "employee_number")[:limit]
        )

        return [
            {
                "rank": position,
                "user_id": user.user_id,
                "employee_number": user.employee_number,
                "name": user.name,
                "department": user.department,
                "designation": user.designation,
                "credit_points": user.credit_points,
                "idea_count": user.idea_count,
            }
            for position, user in enumerate(users, start=1)
        ]

    def department(self) -> list[dict[str, Any]]:
        """Aggregate active ideas per department.

        Returns:
            One entry per department with at least one active idea, highest
            total credit points first.
        """
        rows = (
            Idea.objects.filter(is_active=True)
            .order_by()
            .values("department")
            .annotate(
                total_ideas=Count("idea_id"),
                approved_ideas=Count(
                    "idea_id", filter=Q(status=IdeaStatus.APPROVED.value)
                ),
                implemented_ideas=Count(
                    "idea_id", filter=Q(status=IdeaStatus.IMPLEMENTED.value)
                ),
                total_savings=Sum("estimated_savings"),
            )
        )

        employee_counts = dict(
            User.objects.filter(is_active=True)
            .order_by()
            .values_list("department")
            .annotate(count=Count("user_id"))
        )

        entries = []
        for row in rows:
            breakdown = ScoreBreakdown(
                other=row["total_ideas"]
                - row["approved_ideas"]
                - row["implemented_ideas"],
                approved=row["approved_ideas"],
                implemented=row["implemented_ideas"],
            )
            employee_count = employee_counts.get(row["department"], 0)
            entries.append(
                {
                    "department": row["department"],
                    "total_ideas": row["total_ideas"],
                    "approved_ideas": row["approved_ideas"],
                    "implemented_ideas": row["implemented_ideas"],
                    "total_savings": row["total_savings"] or Decimal("0"),
                    "employee_count": employee_count,
                    "avg_ideas_per_employee": row["total_ideas"]
                    / max(employee_count, 1),
                    "total_credit_points": breakdown.total,
                }
            )

        entries.sort(key=lambda entry: entry["total_credit_points"], reverse=True)
        logger.debug("department_leaderboard_computed", department_count=len(entries))
        return entries


leaderboard_service = LeaderboardService()
