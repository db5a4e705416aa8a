"""Database models for core application."""

from core.models.idea import Idea
from core.models.notification import Notification
from core.models.user import User

__all__ = ["Idea", "Notification", "User"]
