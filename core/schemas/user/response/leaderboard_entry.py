"""Leaderboard response schemas."""

from decimal import Decimal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_summary import UserSummary


class LeaderboardEntry(UserSummary):
    """One employee on the individual leaderboard."""

    rank: int = Field(..., ge=1, description="1-based position")
    credit_points: int = Field(..., ge=0, description="Cached credit points")
    idea_count: int = Field(..., ge=0, description="Number of active ideas")


class DepartmentLeaderboardEntry(BaseSchemaModel):
    """Aggregated idea activity of one department."""

    department: str = Field(..., description="Department name")
    total_ideas: int = Field(..., ge=0)
    approved_ideas: int = Field(..., ge=0)
    implemented_ideas: int = Field(..., ge=0)
    total_savings: Decimal = Field(..., description="Sum of estimated savings")
    employee_count: int = Field(..., ge=0, description="Active employees")
    avg_ideas_per_employee: float = Field(..., ge=0)
    total_credit_points: int = Field(..., ge=0)
