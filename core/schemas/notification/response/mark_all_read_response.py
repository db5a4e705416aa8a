"""Response schema for marking all notifications as read."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MarkAllReadResponse(BaseSchemaModel):
    """Number of notifications that were marked as read."""

    updated_count: int = Field(..., ge=0)
