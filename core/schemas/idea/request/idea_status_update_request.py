"""Idea status change request schema."""

from decimal import Decimal

from pydantic import Field

from core.enums import IdeaStatus
from core.schemas.base_schema_model import BaseSchemaModel


class IdeaStatusUpdateRequest(BaseSchemaModel):
    """Request body for PUT /ideas/<id>/status."""

    status: IdeaStatus = Field(..., description="Status to move the idea to")
    review_comments: str | None = Field(None, max_length=2000)
    actual_savings: Decimal | None = Field(
        None, ge=0, max_digits=14, decimal_places=2
    )
