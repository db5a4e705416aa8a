"""User account creation request schema."""

from pydantic import EmailStr, Field

from core.enums import Department, UserRole
from core.schemas.base_schema_model import BaseSchemaModel


class UserCreateRequest(BaseSchemaModel):
    """Request body for POST /users.

    Credit points are not accepted; new accounts start at zero.
    """

    employee_number: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., description="Work email address")
    department: Department = Field(..., description="Department of the employee")
    designation: str = Field(..., min_length=1, max_length=255)
    role: UserRole = Field(UserRole.EMPLOYEE.value, description="Access role")
    mobile_number: str = Field("", max_length=20)
