"""Health check service with cached dependency probes."""

import time

from django.core.cache import cache
from django.db import connection
from django.db.utils import OperationalError

import structlog

from core.enums import HealthStatus
from core.realtime import SessionRegistry, session_registry
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(
        self,
        cache_ttl_seconds: float = 5.0,
        registry: SessionRegistry = session_registry,
    ) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
            registry: Live update sessions reported on the readiness probe
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self.registry = registry
        self._cached: dict[str, tuple[float, DependencyHealth]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive)."""
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and cache health checks.

        Returns degraded (ready=True, degraded=True) when a dependency is
        down so the service stays deployable while it reconnects.

        Returns:
            ReadinessResponse with overall status and dependency health
        """
        dependencies = {
            "database": self.check_database_health(),
            "cache": self.check_cache_health(),
        }
        degraded = not all(health.healthy for health in dependencies.values())

        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
            live_sessions=self.registry.count(),
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity, cached for ``cache_ttl_seconds``."""
        return self._cached_probe("database", self._probe_database)

    def check_cache_health(self) -> DependencyHealth:
        """Check the Redis-backed cache, cached for ``cache_ttl_seconds``."""
        return self._cached_probe("cache", self._probe_cache)

    def _cached_probe(self, name, probe) -> DependencyHealth:
        current_time = time.time()
        cached = self._cached.get(name)
        if cached is not None and (current_time - cached[0]) < self.cache_ttl_seconds:
            return cached[1]

        start_time = time.perf_counter()
        try:
            healthy, message = probe()
            health_status = HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY
        except OperationalError as e:
            healthy, message = False, f"{name} connection failed: {e!s}"
            health_status = HealthStatus.UNHEALTHY
        except Exception as e:
            healthy, message = False, f"Unexpected error checking {name}: {e!s}"
            health_status = HealthStatus.ERROR

        new_health = DependencyHealth(
            healthy=healthy,
            status=health_status,
            message=message,
            response_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        previous = cached[1] if cached else None
        if not healthy and (previous is None or previous.healthy):
            logger.warning("dependency_unhealthy", dependency=name, message=message)
        elif healthy and previous is not None and not previous.healthy:
            logger.info("dependency_recovered", dependency=name)

        self._cached[name] = (current_time, new_health)
        return new_health

    @staticmethod
    def _probe_database() -> tuple[bool, str]:
        connection.ensure_connection()
        return True, "Database connection successful"

    @staticmethod
    def _probe_cache() -> tuple[bool, str]:
        test_key = "__health_check__"
        cache.set(test_key, "ok", timeout=1)
        if cache.get(test_key) == "ok":
            return True, "Cache connection successful"
        return False, "Cache health check failed: unexpected result"


# Global health service instance
health_service = HealthService()
