"""Idea model for improvement proposals."""

import uuid
from typing import ClassVar

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from core.enums import BenefitCategory, Department, IdeaStatus


class Idea(models.Model):
    """Continuous improvement idea submitted by an employee.

    Attributes:
        idea_id: Unique identifier for the idea.
        submitted_by: The employee who owns the idea.
        submitted_by_employee_number: Copy of the submitter's employee number,
            written together with ``submitted_by`` so ideas can be filtered by
            employee number directly. Must equal
            ``submitted_by.employee_number`` at write time.
        status: Current lifecycle status.
        images: Ordered list of stored-file metadata dicts supplied by the
            upload handler (filename, original_name, mimetype, size,
            upload_date).
        implementation_date: Set when the idea is moved to implemented and
            never cleared afterwards.
        is_active: False once the submitter soft-deletes the idea. Inactive
            ideas are excluded from scoring and listing.
    """

    idea_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the idea",
    )
    title = models.CharField(max_length=200)
    problem = models.TextField()
    improvement = models.TextField()
    benefit = models.CharField(
        max_length=20,
        choices=[(benefit.value, benefit.value) for benefit in BenefitCategory],
    )
    department = models.CharField(
        max_length=50,
        choices=[(dept.value, dept.value) for dept in Department],
    )
    estimated_savings = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
    )
    actual_savings = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
    )
    tags = models.JSONField(default=list, blank=True)
    images = models.JSONField(default=list, blank=True, encoder=DjangoJSONEncoder)
    status = models.CharField(
        max_length=20,
        choices=[(status.value, status.value) for status in IdeaStatus],
        default=IdeaStatus.UNDER_REVIEW.value,
    )
    review_comments = models.TextField(null=True, blank=True)
    implementation_date = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    submitted_by = models.ForeignKey(
        "core.User",
        on_delete=models.PROTECT,
        related_name="ideas",
        db_column="submitted_by_id",
    )
    submitted_by_employee_number = models.CharField(max_length=50)
    reviewed_by = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_ideas",
        db_column="reviewed_by_id",
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "ideas"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["submitted_by", "is_active"]),
            models.Index(fields=["submitted_by_employee_number"]),
            models.Index(fields=["status", "-created_at"]),
            models.Index(fields=["department"]),
        ]

    def __str__(self) -> str:
        """Return string representation of idea."""
        return f"{self.title} [{self.status}]"

    def __repr__(self) -> str:
        """Return detailed representation of idea."""
        return (
            f"<Idea(id={self.idea_id}, "
            f"status={self.status}, "
            f"submitted_by={self.submitted_by_id}, "
            f"is_active={self.is_active})>"
        )
