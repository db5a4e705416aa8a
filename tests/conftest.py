"""Pytest configuration and shared fixtures."""

import os

import django

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "idea_service.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide a DRF test client."""
    from rest_framework.test import APIClient  # noqa: PLC0415

    return APIClient()


@pytest.fixture
def employee(db):
    """Provide a persisted employee."""
    from tests.factories import make_user  # noqa: PLC0415

    return make_user()
