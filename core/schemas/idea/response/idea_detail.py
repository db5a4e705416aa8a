"""Idea response schema."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.idea.idea_image import IdeaImage
from core.schemas.user.user_summary import UserSummary


class IdeaDetail(BaseSchemaModel):
    """Idea as returned by the API."""

    idea_id: UUID = Field(..., description="Unique identifier for the idea")
    title: str
    problem: str
    improvement: str
    benefit: str
    department: str
    estimated_savings: Decimal | None = None
    actual_savings: Decimal | None = None
    tags: list[str] = Field(default_factory=list)
    images: list[IdeaImage] = Field(default_factory=list)
    status: str
    review_comments: str | None = None
    implementation_date: datetime | None = None
    submitted_by: UserSummary
    submitted_by_employee_number: str
    reviewed_by: UserSummary | None = None
    reviewed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
