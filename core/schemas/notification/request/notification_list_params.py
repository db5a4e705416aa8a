"""Notification listing query parameters."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class NotificationListParams(BaseSchemaModel):
    """Query parameters for GET /notifications."""

    is_read: bool | None = Field(None, description="Filter by read state")
