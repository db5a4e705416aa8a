"""Idea submission request schema."""

from decimal import Decimal

from pydantic import Field

from core.enums import BenefitCategory, Department
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.idea.idea_image import IdeaImage


class IdeaCreateRequest(BaseSchemaModel):
    """Request body for POST /ideas.

    New ideas always start under review; the status cannot be chosen by the
    submitter.
    """

    title: str = Field(..., min_length=1, max_length=200)
    problem: str = Field(..., min_length=1, description="Problem being addressed")
    improvement: str = Field(..., min_length=1, description="Proposed improvement")
    benefit: BenefitCategory = Field(..., description="Expected benefit category")
    department: Department = Field(..., description="Department the idea targets")
    estimated_savings: Decimal | None = Field(
        None, ge=0, max_digits=14, decimal_places=2
    )
    tags: list[str] = Field(default_factory=list)
    images: list[IdeaImage] = Field(
        default_factory=list, description="Metadata of already stored images"
    )
