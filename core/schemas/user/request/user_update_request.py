"""User account update request schema."""

from pydantic import EmailStr, Field, model_validator

from core.enums import Department, UserRole
from core.schemas.base_schema_model import BaseSchemaModel


class UserUpdateRequest(BaseSchemaModel):
    """Request body for PUT /users/<id>.

    Every field is optional and only fields present in the body change.
    Employee number and credit points cannot be changed here.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    department: Department | None = None
    designation: str | None = Field(None, max_length=255)
    role: UserRole | None = None
    mobile_number: str | None = Field(None, max_length=20)
    is_active: bool | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        """Reject null for any field present in the body.

        Returns:
            The validated model instance

        Raises:
            ValueError: If a field is sent as null
        """
        cleared = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self
