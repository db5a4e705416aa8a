"""Faker-backed helpers creating test users, ideas and notifications."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import jwt
from django.conf import settings
from faker import Faker

from core.enums import (
    BenefitCategory,
    Department,
    IdeaStatus,
    NotificationType,
    UserRole,
)
from core.models import Idea, Notification, User

fake = Faker()


def make_user(**overrides) -> User:
    """Create and persist a user.

    Args:
        **overrides: Field values replacing the generated ones.

    Returns:
        The persisted User
    """
    fields = {
        "employee_number": fake.unique.bothify(text="EMP#####"),
        "name": fake.name(),
        "email": fake.email(),
        "department": fake.random_element([d.value for d in Department]),
        "designation": fake.job()[:255],
        "role": UserRole.EMPLOYEE.value,
        "mobile_number": fake.numerify(text="##########"),
    }
    fields.update(overrides)
    return User.objects.create(**fields)


def make_idea(submitter: User, **overrides) -> Idea:
    """Create and persist an idea without any side effects.

    Args:
        submitter: Owner of the idea.
        **overrides: Field values replacing the generated ones.

    Returns:
        The persisted Idea
    """
    fields = {
        "title": fake.sentence(nb_words=5)[:200],
        "problem": fake.paragraph(),
        "improvement": fake.paragraph(),
        "benefit": fake.random_element([b.value for b in BenefitCategory]),
        "department": submitter.department,
        "estimated_savings": Decimal(fake.random_int(min=100, max=50000)),
        "tags": fake.words(nb=2),
        "status": IdeaStatus.UNDER_REVIEW.value,
        "submitted_by": submitter,
        "submitted_by_employee_number": submitter.employee_number,
    }
    fields.update(overrides)
    return Idea.objects.create(**fields)


def make_notification(recipient: User, **overrides) -> Notification:
    """Create and persist a notification for a recipient."""
    fields = {
        "recipient": recipient,
        "recipient_employee_number": recipient.employee_number,
        "type": NotificationType.IDEA_APPROVED.value,
        "title": "Idea Approved",
        "message": fake.sentence(),
    }
    fields.update(overrides)
    return Notification.objects.create(**fields)


def idea_payload(**overrides) -> dict:
    """Build a valid camelCase request body for POST /ideas."""
    payload = {
        "title": fake.sentence(nb_words=4)[:200],
        "problem": fake.paragraph(),
        "improvement": fake.paragraph(),
        "benefit": BenefitCategory.SAFETY.value,
        "department": Department.ENGINEERING.value,
        "estimatedSavings": "1500.00",
        "tags": ["safety"],
    }
    payload.update(overrides)
    return payload


def bearer_token(user: User, lifetime: timedelta = timedelta(hours=1)) -> str:
    """Sign an access token for a user with the test JWT secret."""
    now = datetime.now(UTC)
    return jwt.encode(
        {"sub": str(user.user_id), "iat": now, "exp": now + lifetime},
        settings.JWT_SECRET,
        algorithm="HS256",
    )
