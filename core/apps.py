"""Django application configuration for core."""

from django.apps import AppConfig

import structlog

logger = structlog.get_logger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Improvement ideas"

    def ready(self) -> None:
        """Log the scoring tiers in effect once the app registry is ready."""
        from core.constants import (  # noqa: PLC0415
            APPROVED_POINTS,
            DEFAULT_POINTS,
            IMPLEMENTED_POINTS,
        )

        logger.info(
            "core_app_ready",
            implemented_points=IMPLEMENTED_POINTS,
            approved_points=APPROVED_POINTS,
            default_points=DEFAULT_POINTS,
        )
