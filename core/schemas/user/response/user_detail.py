"""Full user account schema."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserDetail(BaseSchemaModel):
    """User account as returned to admins and on the caller's own profile."""

    user_id: UUID = Field(..., description="Unique identifier for the user")
    employee_number: str
    name: str
    email: str = ""
    department: str
    designation: str = ""
    role: str
    mobile_number: str = ""
    credit_points: int = Field(0, description="Cached score of active ideas")
    is_active: bool
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime
