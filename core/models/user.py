"""User model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import Department, UserRole


class User(models.Model):
    """Employee account matching the users table.

    ``credit_points`` is a cached value derived from the user's active ideas.
    It is written only by the credit recalculation service and must equal the
    score of the user's active ideas once a mutation has fully completed.

    This model is unmanaged as the database schema is owned externally.
    """

    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee_number = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, blank=True, default="")
    department = models.CharField(
        max_length=50,
        choices=[(dept.value, dept.value) for dept in Department],
    )
    designation = models.CharField(max_length=255, blank=True, default="")
    role = models.CharField(
        max_length=10,
        choices=[(role.value, role.value) for role in UserRole],
        default=UserRole.EMPLOYEE.value,
    )
    mobile_number = models.CharField(max_length=20, blank=True, default="")
    is_active = models.BooleanField(default=True)
    credit_points = models.PositiveIntegerField(default=0)
    last_login = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["role", "is_active"]),
            models.Index(fields=["-credit_points"]),
        ]

    @property
    def is_authenticated(self) -> bool:
        """Users resolved from a bearer token are always authenticated."""
        return True

    @property
    def is_reviewer(self) -> bool:
        """Whether the user may change idea statuses."""
        return self.role in (UserRole.REVIEWER.value, UserRole.ADMIN.value)

    @property
    def is_admin(self) -> bool:
        """Whether the user has the admin role."""
        return self.role == UserRole.ADMIN.value

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.name} ({self.employee_number})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return (
            f"<User(user_id={self.user_id}, "
            f"employee_number='{self.employee_number}', "
            f"credit_points={self.credit_points})>"
        )
