"""User-related Pydantic schemas."""

from core.schemas.user.leaderboard_params import LeaderboardParams
from core.schemas.user.request.user_create_request import UserCreateRequest
from core.schemas.user.request.user_list_params import UserListParams
from core.schemas.user.request.user_update_request import UserUpdateRequest
from core.schemas.user.response.credit_recalculation_response import (
    CreditRecalculationResponse,
    ReconciliationQueuedResponse,
)
from core.schemas.user.response.leaderboard_entry import (
    DepartmentLeaderboardEntry,
    LeaderboardEntry,
)
from core.schemas.user.response.user_detail import UserDetail
from core.schemas.user.user_summary import UserSummary

__all__ = [
    "CreditRecalculationResponse",
    "DepartmentLeaderboardEntry",
    "LeaderboardEntry",
    "LeaderboardParams",
    "ReconciliationQueuedResponse",
    "UserCreateRequest",
    "UserDetail",
    "UserListParams",
    "UserSummary",
    "UserUpdateRequest",
]
