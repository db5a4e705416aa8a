"""Repositories wrapping the idea, user and notification stores."""

from core.repositories.idea_repository import IdeaRepository
from core.repositories.notification_repository import NotificationRepository
from core.repositories.user_repository import UserRepository

__all__ = ["IdeaRepository", "NotificationRepository", "UserRepository"]
