"""Common utilities for performance tests."""

import os

from locust import HttpUser, between


class BasePerformanceUser(HttpUser):
    """Base class for performance test users.

    Set ``PERF_BEARER_TOKEN`` to a token signed with the target's
    ``JWT_SECRET`` before running authenticated scenarios.
    """

    abstract = True
    wait_time = between(1, 3)
    token = None

    def on_start(self):
        """Attach the bearer token to every request of this user."""
        self.token = os.getenv("PERF_BEARER_TOKEN", "")
        self.client.headers["Authorization"] = f"Bearer {self.token}"
