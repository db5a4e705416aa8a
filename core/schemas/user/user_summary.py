"""Public summary of an employee."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserSummary(BaseSchemaModel):
    """Employee fields shown next to ideas and on leaderboards."""

    user_id: UUID = Field(..., description="Unique identifier for the user")
    employee_number: str = Field(..., description="Employee number")
    name: str = Field(..., description="Display name")
    department: str = Field(..., description="Department the employee works in")
    designation: str = Field("", description="Job title")
