"""Idea statistics response schema."""

from decimal import Decimal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class StatsBucket(BaseSchemaModel):
    """Count of active ideas sharing one value of a grouping field."""

    key: str = Field(..., description="Status, department or benefit value")
    count: int = Field(..., ge=0)
    total_savings: Decimal | None = Field(
        None, description="Sum of estimated savings; absent for benefit groups"
    )


class IdeaStatsResponse(BaseSchemaModel):
    """Active idea counts grouped by status, department and benefit."""

    status: list[StatsBucket]
    department: list[StatsBucket]
    benefit: list[StatsBucket]
