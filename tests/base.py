"""Base test classes for different test types."""

from django.test import TestCase

from rest_framework.test import APIClient

from tests.factories import bearer_token


class BaseUnitTest(TestCase):
    """Base class for unit tests.

    Use this for tests of services and repositories against the SQLite
    in-memory database.
    """


class BaseComponentTest(TestCase):
    """Base class for component tests.

    Use this for tests that drive endpoints through the full Django
    request/response cycle, including JWT authentication.
    """

    def setUp(self):
        """Set up an API client without credentials."""
        super().setUp()
        self.client = APIClient()

    def authenticate(self, user):
        """Send a valid bearer token for ``user`` on subsequent requests."""
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {bearer_token(user)}")
