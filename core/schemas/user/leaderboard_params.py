"""Leaderboard query parameters."""

from typing import Literal

from pydantic import Field

from core.constants import INDIVIDUAL_LEADERBOARD_LIMIT
from core.schemas.base_schema_model import BaseSchemaModel


class LeaderboardParams(BaseSchemaModel):
    """Query parameters for GET /users/leaderboard."""

    type: Literal["individual", "department"] = Field(
        "individual", description="Rank individual employees or departments"
    )
    limit: int = Field(
        INDIVIDUAL_LEADERBOARD_LIMIT,
        ge=1,
        le=INDIVIDUAL_LEADERBOARD_LIMIT,
        description="Maximum number of individual entries",
    )
