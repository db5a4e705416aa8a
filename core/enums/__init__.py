"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.idea import BenefitCategory, Department, IdeaStatus
from core.enums.notification import NotificationPriority, NotificationType
from core.enums.user_role import UserRole

__all__ = [
    "BenefitCategory",
    "Department",
    "HealthStatus",
    "IdeaStatus",
    "NotificationPriority",
    "NotificationType",
    "UserRole",
]
