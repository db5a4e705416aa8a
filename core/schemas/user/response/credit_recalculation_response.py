"""Credit point recalculation response schemas."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class CreditRecalculationResponse(BaseSchemaModel):
    """Result of recalculating one user's credit points."""

    user_id: UUID
    employee_number: str
    old_points: int = Field(..., ge=0)
    new_points: int = Field(..., ge=0)
    changed: bool


class ReconciliationQueuedResponse(BaseSchemaModel):
    """Acknowledgement that a full reconciliation job was queued."""

    job_id: str = Field(..., description="RQ job identifier")
    status: str = Field("queued", description="Job status at enqueue time")
