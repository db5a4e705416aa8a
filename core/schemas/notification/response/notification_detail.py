"""Schema for a recipient's notification."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class NotificationDetail(BaseSchemaModel):
    """Notification as shown to its recipient."""

    notification_id: UUID = Field(..., description="Unique notification identifier")
    recipient_id: UUID = Field(..., description="ID of the receiving user")
    type: str = Field(..., description="Notification type")
    title: str = Field(..., description="Rendered notification title")
    message: str = Field(..., description="Rendered notification message")
    related_idea_id: UUID | None = Field(None, description="Idea the event concerns")
    related_user_id: UUID | None = Field(
        None, description="User whose action caused the event"
    )
    metadata: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = Field(..., description="Whether the notification has been read")
    read_at: datetime | None = None
    priority: str = Field(..., description="low, medium or high")
    created_at: datetime = Field(..., description="When the notification was created")
