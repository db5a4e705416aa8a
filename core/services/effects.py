"""Failure boundaries for idea mutations.

The primary store calls of an operation run inside ``store_step``, which
turns database errors into a ``DependencyFailureError`` naming the step.
Recalculation, notification fanout and live update broadcasts run after the
primary idea write has committed. Each runs through ``run_best_effort`` so a
failure is logged and never reaches the caller or the other effects.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from django.db import DatabaseError

import structlog

from core.exceptions import DependencyFailureError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@contextmanager
def store_step(step: str) -> Iterator[None]:
    """Classify database failures of a primary store call.

    Args:
        step: Name of the step, e.g. ``idea_insert``.

    Raises:
        DependencyFailureError: If the wrapped block raised a DatabaseError.
    """
    try:
        yield
    except DatabaseError as e:
        logger.error(
            "store_step_failed",
            step=step,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise DependencyFailureError(step) from e


def run_best_effort(
    effect: str,
    func: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> T | None:
    """Run a secondary effect, logging and suppressing any failure.

    Args:
        effect: Short effect name used in the log event.
        func: Callable performing the effect.
        *args: Positional arguments for ``func``.
        **kwargs: Keyword arguments for ``func``.

    Returns:
        The callable's result, or None if it raised.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        logger.exception(
            "secondary_effect_failed",
            effect=effect,
            error=str(e),
            error_type=type(e).__name__,
        )
        return None
