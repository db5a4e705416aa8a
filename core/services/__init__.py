"""Services for the core app."""

from core.services.credit_service import (
    CreditRecalculationResult,
    CreditService,
    credit_service,
)
from core.services.health_service import HealthService, health_service
from core.services.idea_lifecycle_service import (
    IdeaLifecycleService,
    idea_lifecycle_service,
)
from core.services.leaderboard_service import LeaderboardService, leaderboard_service
from core.services.notification_fanout import (
    NotificationFanoutService,
    notification_fanout,
)
from core.services.user_admin_service import UserAdminService, user_admin_service
from core.services.user_notification_service import (
    UserNotificationService,
    user_notification_service,
)

__all__ = [
    "CreditRecalculationResult",
    "CreditService",
    "HealthService",
    "IdeaLifecycleService",
    "LeaderboardService",
    "NotificationFanoutService",
    "UserAdminService",
    "UserNotificationService",
    "credit_service",
    "health_service",
    "idea_lifecycle_service",
    "leaderboard_service",
    "notification_fanout",
    "user_admin_service",
    "user_notification_service",
]
