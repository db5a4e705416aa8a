"""User listing query parameters."""

from pydantic import Field

from core.enums import Department, UserRole
from core.schemas.base_schema_model import BaseSchemaModel


class UserListParams(BaseSchemaModel):
    """Query parameters for GET /users."""

    department: Department | None = None
    role: UserRole | None = None
    is_active: bool | None = Field(
        True, description="Account state to list, active by default"
    )
    search: str | None = Field(
        None,
        max_length=100,
        description="Case-insensitive text in name, employee number or email",
    )
