"""Background jobs for credit point reconciliation.

Regular recalculations run inline with the idea mutation that caused them.
These jobs rescore every user at once, which is only needed to repair drift
(e.g. after ideas were changed directly in the database).
"""

import django_rq
import structlog
from rq.job import Job

from core.services.credit_service import credit_service

logger = structlog.get_logger(__name__)

RECALCULATE_ALL_REASON = "Credit points reconciliation"


def recalculate_all_credit_points_job(
    reason: str = RECALCULATE_ALL_REASON,
    requested_by: str | None = None,
) -> int:
    """Recalculate credit points for all users.

    This job is executed by RQ workers.

    Args:
        reason: Reason passed on to credit point notifications.
        requested_by: Employee number of the admin who queued the job.

    Returns:
        Number of users whose credit points changed.
    """
    logger.info(
        "credit_reconciliation_started",
        reason=reason,
        requested_by=requested_by,
    )
    return credit_service.recalculate_all(reason)


def enqueue_recalculate_all(
    reason: str = RECALCULATE_ALL_REASON,
    requested_by: str | None = None,
) -> Job:
    """Queue a full credit point reconciliation.

    Args:
        reason: Reason passed on to credit point notifications.
        requested_by: Employee number of the admin who queued the job.

    Returns:
        The queued RQ job.
    """
    queue = django_rq.get_queue("default")
    job = queue.enqueue(
        "core.jobs.credit_jobs.recalculate_all_credit_points_job",
        reason,
        requested_by,
    )
    logger.info(
        "credit_reconciliation_queued",
        job_id=job.id,
        requested_by=requested_by,
    )
    return job
