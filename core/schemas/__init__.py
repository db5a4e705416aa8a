"""Schemas for the core app."""

from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.idea import (
    IdeaCreateRequest,
    IdeaDetail,
    IdeaImage,
    IdeaListParams,
    IdeaStatsResponse,
    IdeaStatusUpdateRequest,
    IdeaUpdateRequest,
)
from core.schemas.notification import (
    MarkAllReadResponse,
    NotificationDetail,
    NotificationListParams,
)
from core.schemas.user import (
    CreditRecalculationResponse,
    DepartmentLeaderboardEntry,
    LeaderboardEntry,
    LeaderboardParams,
    ReconciliationQueuedResponse,
    UserCreateRequest,
    UserDetail,
    UserListParams,
    UserSummary,
    UserUpdateRequest,
)

__all__ = [
    "CreditRecalculationResponse",
    "DepartmentLeaderboardEntry",
    "DependencyHealth",
    "IdeaCreateRequest",
    "IdeaDetail",
    "IdeaImage",
    "IdeaListParams",
    "IdeaStatsResponse",
    "IdeaStatusUpdateRequest",
    "IdeaUpdateRequest",
    "LeaderboardEntry",
    "LeaderboardParams",
    "LivenessResponse",
    "MarkAllReadResponse",
    "NotificationDetail",
    "NotificationListParams",
    "ReadinessResponse",
    "ReconciliationQueuedResponse",
    "UserCreateRequest",
    "UserDetail",
    "UserListParams",
    "UserSummary",
    "UserUpdateRequest",
]
