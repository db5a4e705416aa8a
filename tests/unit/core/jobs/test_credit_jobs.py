"""Tests for credit point reconciliation jobs."""

from unittest.mock import Mock, patch

from django.test import TestCase

from core.jobs.credit_jobs import (
    RECALCULATE_ALL_REASON,
    enqueue_recalculate_all,
    recalculate_all_credit_points_job,
)
from tests.factories import make_idea, make_user


class TestRecalculateAllCreditPointsJob(TestCase):
    """Test suite for recalculate_all_credit_points_job."""

    def test_rescores_every_user(self):
        drifted = make_user(credit_points=0)
        make_idea(drifted, status="approved")
        correct = make_user(credit_points=10)
        make_idea(correct)

        changed = recalculate_all_credit_points_job(requested_by="EMP00001")

        self.assertEqual(changed, 1)
        drifted.refresh_from_db()
        self.assertEqual(drifted.credit_points, 20)

    def test_passes_reason_to_credit_service(self):
        with patch("core.jobs.credit_jobs.credit_service") as mock_service:
            mock_service.recalculate_all.return_value = 0

            recalculate_all_credit_points_job("Nightly repair")

        mock_service.recalculate_all.assert_called_once_with("Nightly repair")


class TestEnqueueRecalculateAll(TestCase):
    """Test suite for enqueue_recalculate_all."""

    @patch("core.jobs.credit_jobs.django_rq.get_queue")
    def test_enqueues_on_default_queue(self, mock_get_queue):
        mock_queue = Mock()
        mock_queue.enqueue.return_value = Mock(id="job-123")
        mock_get_queue.return_value = mock_queue

        job = enqueue_recalculate_all(requested_by="EMP00001")

        self.assertEqual(job.id, "job-123")
        mock_get_queue.assert_called_once_with("default")
        mock_queue.enqueue.assert_called_once_with(
            "core.jobs.credit_jobs.recalculate_all_credit_points_job",
            RECALCULATE_ALL_REASON,
            "EMP00001",
        )
