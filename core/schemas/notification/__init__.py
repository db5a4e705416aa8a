"""Notification schemas."""

from core.schemas.notification.request.notification_list_params import (
    NotificationListParams,
)
from core.schemas.notification.response.mark_all_read_response import (
    MarkAllReadResponse,
)
from core.schemas.notification.response.notification_detail import (
    NotificationDetail,
)

__all__ = ["MarkAllReadResponse", "NotificationDetail", "NotificationListParams"]
