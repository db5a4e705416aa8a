"""Idea listing query parameters."""

from pydantic import Field

from core.enums import BenefitCategory, Department, IdeaStatus
from core.schemas.base_schema_model import BaseSchemaModel


class IdeaListParams(BaseSchemaModel):
    """Query parameters for GET /ideas and GET /ideas/mine."""

    status: IdeaStatus | None = None
    department: Department | None = None
    benefit: BenefitCategory | None = None
    submitted_by: str | None = Field(
        None, description="Employee number of the submitter"
    )
    search: str | None = Field(
        None,
        max_length=200,
        description="Case-insensitive text in title, problem or improvement",
    )
