"""Idea-related enumerations.

Values match the strings stored on idea records and accepted by the API.
"""

from enum import Enum


class IdeaStatus(str, Enum):
    """Lifecycle status of an improvement idea.

    Transitions between statuses are not restricted: a reviewer may move an
    idea from any status to any other.
    """

    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    IMPLEMENTING = "implementing"
    IMPLEMENTED = "implemented"


class BenefitCategory(str, Enum):
    """Primary benefit an idea is expected to deliver."""

    COST_SAVING = "cost_saving"
    SAFETY = "safety"
    QUALITY = "quality"
    PRODUCTIVITY = "productivity"
    OTHERS = "others"


class Department(str, Enum):
    """Fixed set of departments ideas and users belong to."""

    ENGINEERING = "Engineering"
    QUALITY = "Quality"
    MANUFACTURING = "Manufacturing"
    MANAGEMENT = "Management"
    ADMINISTRATION = "Administration"
    HR = "HR"
    FINANCE = "Finance"
