"""Credit point scoring for a user's active ideas.

Each active idea contributes once, valued by its current status only:

- implemented: 30 points
- approved: 20 points
- anything else (under_review, rejected, implementing, unknown): 10 points

Tiers never accumulate: an implemented idea is worth 30, not 10 + 20 + 30.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from core.constants import APPROVED_POINTS, DEFAULT_POINTS, IMPLEMENTED_POINTS
from core.enums import IdeaStatus


class HasStatus(Protocol):
    """Anything carrying an idea status, e.g. an Idea model instance."""

    status: str


@dataclass(frozen=True)
class ScoreBreakdown:
    """Tier counts behind a computed score."""

    other: int
    approved: int
    implemented: int

    @property
    def total(self) -> int:
        """Credit points for these tier counts."""
        return (
            self.other * DEFAULT_POINTS
            + self.approved * APPROVED_POINTS
            + self.implemented * IMPLEMENTED_POINTS
        )

    @property
    def idea_count(self) -> int:
        """Number of ideas scored."""
        return self.other + self.approved + self.implemented


def points_for_status(status: str) -> int:
    """Return the point value of a single idea in the given status."""
    if status == IdeaStatus.IMPLEMENTED.value:
        return IMPLEMENTED_POINTS
    if status == IdeaStatus.APPROVED.value:
        return APPROVED_POINTS
    return DEFAULT_POINTS


def score_breakdown(ideas: Iterable[HasStatus]) -> ScoreBreakdown:
    """Partition ideas into scoring tiers by their current status.

    Args:
        ideas: A single user's active ideas, in any order.

    Returns:
        ScoreBreakdown with one count per tier; every idea lands in exactly
        one tier.
    """
    other = approved = implemented = 0
    for idea in ideas:
        if idea.status == IdeaStatus.IMPLEMENTED.value:
            implemented += 1
        elif idea.status == IdeaStatus.APPROVED.value:
            approved += 1
        else:
            other += 1
    return ScoreBreakdown(other=other, approved=approved, implemented=implemented)


def compute_score(ideas: Iterable[HasStatus]) -> int:
    """Compute the aggregate credit points for a user's active ideas.

    Args:
        ideas: A single user's active ideas, in any order.

    Returns:
        Total credit points. Depends only on the multiset of statuses.
    """
    return sum(points_for_status(idea.status) for idea in ideas)
