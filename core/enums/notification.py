"""Notification-related enumerations.

This module contains the closed set of notification types and the
priority levels used by the notification fanout.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Notification types.

    Every type the service emits maps to a title/message template in the
    notification template registry. The informational members are accepted
    on stored records but never emitted. The idea_<status> members are
    derived from the IdeaStatus the idea was moved to.
    """

    # Idea lifecycle events
    IDEA_SUBMITTED = "idea_submitted"
    IDEA_UNDER_REVIEW = "idea_under_review"
    IDEA_APPROVED = "idea_approved"
    IDEA_REJECTED = "idea_rejected"
    IDEA_IMPLEMENTING = "idea_implementing"
    IDEA_IMPLEMENTED = "idea_implemented"
    IDEA_UPDATED = "idea_updated"

    # Scoring events
    CREDIT_POINTS_UPDATED = "credit_points_updated"

    # Informational, not emitted by this service
    REVIEW_ASSIGNED = "review_assigned"
    LEADERBOARD_CHANGE = "leaderboard_change"
    MILESTONE_ACHIEVED = "milestone_achieved"
    DEPARTMENT_LEADER = "department_leader"
    WEEKLY_SUMMARY = "weekly_summary"

    @classmethod
    def for_status(cls, status: str) -> "NotificationType":
        """Return the status-change notification type for an idea status.

        Args:
            status: IdeaStatus value the idea was moved to.

        Returns:
            The matching idea_<status> notification type.

        Raises:
            ValueError: If the status has no matching notification type.
        """
        return cls(f"idea_{status}")


class NotificationPriority(str, Enum):
    """Notification priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
