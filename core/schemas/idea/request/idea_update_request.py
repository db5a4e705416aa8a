"""Idea edit request schema."""

from decimal import Decimal

from pydantic import Field, model_validator

from core.enums import BenefitCategory, Department
from core.schemas.base_schema_model import BaseSchemaModel

# Columns that cannot be cleared; only estimated savings may be set to null
NON_NULLABLE_FIELDS = (
    "title",
    "problem",
    "improvement",
    "benefit",
    "department",
    "tags",
)


class IdeaUpdateRequest(BaseSchemaModel):
    """Request body for PUT /ideas/<id>.

    Only the fields present in the body are changed. Unknown fields are
    dropped.
    """

    title: str | None = Field(None, min_length=1, max_length=200)
    problem: str | None = Field(None, min_length=1)
    improvement: str | None = Field(None, min_length=1)
    benefit: BenefitCategory | None = None
    department: Department | None = None
    estimated_savings: Decimal | None = Field(
        None, ge=0, max_digits=14, decimal_places=2
    )
    tags: list[str] | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        """Reject null for fields the idea must always have.

        Returns:
            The validated model instance

        Raises:
            ValueError: If a non-nullable field is sent as null
        """
        cleared = [
            name
            for name in NON_NULLABLE_FIELDS
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self
