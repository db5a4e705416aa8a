"""Unit tests for core.services.idea_lifecycle_service."""

import uuid
from decimal import Decimal
from unittest.mock import MagicMock, patch

from django.db import OperationalError

from core.exceptions import DependencyFailureError, IdeaNotFoundError
from core.models import Idea, Notification
from core.repositories import IdeaRepository
from core.services.credit_service import CreditService
from core.services.idea_lifecycle_service import IdeaLifecycleService
from core.services.notification_fanout import NotificationFanoutService
from tests.base import BaseUnitTest
from tests.factories import make_idea, make_user


def draft(**overrides):
    fields = {
        "title": "Label the emergency exits",
        "problem": "Exits are hard to find in smoke",
        "improvement": "Add photoluminescent signs",
        "benefit": "safety",
        "department": "Manufacturing",
        "estimated_savings": Decimal("250.00"),
        "tags": ["safety", "signage"],
    }
    fields.update(overrides)
    return fields


class LifecycleTestCase(BaseUnitTest):
    """Wires the lifecycle service to real stores and a mock broadcaster."""

    def setUp(self):
        self.fanout = NotificationFanoutService()
        self.credits = CreditService(fanout=self.fanout)
        self.broadcaster = MagicMock()
        self.service = IdeaLifecycleService(
            credits=self.credits,
            fanout=self.fanout,
            broadcaster=self.broadcaster,
        )
        self.employee = make_user(role="employee", department="Manufacturing")
        self.reviewer = make_user(role="reviewer")
        self.admin = make_user(role="admin")

    def points(self, user):
        user.refresh_from_db()
        return user.credit_points


class TestSubmit(LifecycleTestCase):
    """Tests for IdeaLifecycleService.submit."""

    def test_persists_idea_under_review_with_submitter_copy(self):
        idea = self.service.submit(draft(), self.employee)

        stored = Idea.objects.get(idea_id=idea.idea_id)
        self.assertEqual(stored.status, "under_review")
        self.assertEqual(stored.submitted_by_id, self.employee.user_id)
        self.assertEqual(
            stored.submitted_by_employee_number, self.employee.employee_number
        )
        self.assertTrue(stored.is_active)
        self.assertEqual(idea.submitted_by.name, self.employee.name)

    def test_attaches_image_metadata_in_order(self):
        images = [
            {"filename": "a.jpg", "original_name": "A.jpg", "mimetype": "image/jpeg"},
            {"filename": "b.png", "original_name": "B.png", "mimetype": "image/png"},
        ]

        idea = self.service.submit(draft(), self.employee, images=images)

        stored = Idea.objects.get(idea_id=idea.idea_id)
        self.assertEqual([i["filename"] for i in stored.images], ["a.jpg", "b.png"])

    def test_recalculates_submitter_points(self):
        self.service.submit(draft(), self.employee)

        self.assertEqual(self.points(self.employee), 10)

    def test_notifies_every_active_admin_and_reviewer(self):
        make_user(role="reviewer", is_active=False)

        idea = self.service.submit(draft(), self.employee)

        notified = set(
            Notification.objects.filter(
                type="idea_submitted", related_idea=idea
            ).values_list("recipient_id", flat=True)
        )
        self.assertEqual(notified, {self.reviewer.user_id, self.admin.user_id})

    def test_submitter_gets_credit_notification_only(self):
        self.service.submit(draft(), self.employee)

        types = list(
            Notification.objects.filter(recipient=self.employee).values_list(
                "type", flat=True
            )
        )
        self.assertEqual(types, ["credit_points_updated"])

    def test_no_reviewers_still_creates_idea_and_scores(self):
        self.reviewer.delete()
        self.admin.delete()

        idea = self.service.submit(draft(), self.employee)

        self.assertTrue(Idea.objects.filter(idea_id=idea.idea_id).exists())
        self.assertFalse(Notification.objects.filter(type="idea_submitted").exists())
        self.assertEqual(self.points(self.employee), 10)

    def test_broadcasts_ideas_changed(self):
        self.service.submit(draft(), self.employee)

        self.broadcaster.broadcast_ideas_changed.assert_called_once_with()

    def test_secondary_failures_do_not_undo_submission(self):
        credits = MagicMock()
        credits.recalculate.side_effect = RuntimeError("lock timeout")
        fanout = MagicMock()
        fanout.notify_idea_submitted.side_effect = RuntimeError("insert failed")
        broadcaster = MagicMock()
        broadcaster.broadcast_ideas_changed.side_effect = RuntimeError("closed")
        service = IdeaLifecycleService(
            credits=credits, fanout=fanout, broadcaster=broadcaster
        )

        idea = service.submit(draft(), self.employee)

        self.assertTrue(Idea.objects.filter(idea_id=idea.idea_id).exists())
        credits.recalculate.assert_called_once()
        fanout.notify_idea_submitted.assert_called_once()
        broadcaster.broadcast_ideas_changed.assert_called_once()


class TestChangeStatus(LifecycleTestCase):
    """Tests for IdeaLifecycleService.change_status."""

    def setUp(self):
        super().setUp()
        self.idea = make_idea(self.employee)

    def test_sets_review_fields(self):
        idea = self.service.change_status(
            self.idea.idea_id, "approved", self.reviewer, review_comments="Good"
        )

        self.assertEqual(idea.status, "approved")
        self.assertEqual(idea.reviewed_by_id, self.reviewer.user_id)
        self.assertIsNotNone(idea.reviewed_at)
        self.assertEqual(idea.review_comments, "Good")
        self.assertIsNone(idea.implementation_date)

    def test_omitted_comments_and_savings_are_left_unchanged(self):
        Idea.objects.filter(idea_id=self.idea.idea_id).update(
            review_comments="Earlier note", actual_savings=Decimal("10.00")
        )

        idea = self.service.change_status(self.idea.idea_id, "rejected", self.reviewer)

        self.assertEqual(idea.review_comments, "Earlier note")
        self.assertEqual(idea.actual_savings, Decimal("10.00"))

    def test_implemented_sets_implementation_date_and_savings(self):
        idea = self.service.change_status(
            self.idea.idea_id,
            "implemented",
            self.reviewer,
            actual_savings=Decimal("1200.50"),
        )

        self.assertIsNotNone(idea.implementation_date)
        self.assertEqual(idea.actual_savings, Decimal("1200.50"))

    def test_implementation_date_survives_moving_back(self):
        self.service.change_status(self.idea.idea_id, "implemented", self.reviewer)

        idea = self.service.change_status(self.idea.idea_id, "approved", self.reviewer)

        self.assertIsNotNone(idea.implementation_date)

    def test_notifies_submitter_only_with_status_type(self):
        self.service.change_status(self.idea.idea_id, "approved", self.reviewer)

        status_notifications = Notification.objects.filter(type="idea_approved")
        self.assertEqual(status_notifications.count(), 1)
        notification = status_notifications.get()
        self.assertEqual(notification.recipient_id, self.employee.user_id)
        self.assertEqual(notification.related_user_id, self.reviewer.user_id)
        self.assertEqual(notification.priority, "medium")

    def test_implemented_notification_is_high_priority(self):
        self.service.change_status(self.idea.idea_id, "implemented", self.reviewer)

        notification = Notification.objects.get(type="idea_implemented")
        self.assertEqual(notification.priority, "high")

    def test_rescores_submitter_not_reviewer(self):
        self.service.change_status(self.idea.idea_id, "approved", self.reviewer)

        self.assertEqual(self.points(self.employee), 20)
        self.assertEqual(self.points(self.reviewer), 0)

    def test_any_transition_is_allowed(self):
        for status in ("implemented", "under_review", "rejected", "implementing"):
            with self.subTest(status=status):
                idea = self.service.change_status(
                    self.idea.idea_id, status, self.reviewer
                )
                self.assertEqual(idea.status, status)

    def test_unknown_idea_raises_not_found(self):
        with self.assertRaises(IdeaNotFoundError):
            self.service.change_status(uuid.uuid4(), "approved", self.reviewer)

        self.broadcaster.broadcast_ideas_changed.assert_not_called()


class TestEdit(LifecycleTestCase):
    """Tests for IdeaLifecycleService.edit."""

    def setUp(self):
        super().setUp()
        self.idea = make_idea(self.employee, status="approved")
        self.credits = MagicMock(wraps=self.credits)
        self.service.credits = self.credits

    def test_owner_updates_allowed_fields(self):
        idea = self.service.edit(
            self.idea.idea_id,
            {"title": "Sharper title", "tags": ["lean"]},
            self.employee,
        )

        self.assertEqual(idea.title, "Sharper title")
        self.assertEqual(idea.tags, ["lean"])

    def test_fields_outside_allow_list_are_ignored(self):
        idea = self.service.edit(
            self.idea.idea_id,
            {"status": "implemented", "is_active": False, "title": "New"},
            self.employee,
        )

        self.assertEqual(idea.status, "approved")
        self.assertTrue(idea.is_active)
        self.assertEqual(idea.title, "New")

    def test_edit_never_recalculates(self):
        self.service.edit(self.idea.idea_id, {"title": "New"}, self.employee)

        self.credits.recalculate.assert_not_called()

    def test_owner_edit_sends_no_notification_but_broadcasts(self):
        self.service.edit(self.idea.idea_id, {"title": "New"}, self.employee)

        self.assertFalse(Notification.objects.filter(type="idea_updated").exists())
        self.broadcaster.broadcast_ideas_changed.assert_called_once_with()

    def test_non_owner_and_missing_idea_fail_identically(self):
        with self.assertRaises(IdeaNotFoundError) as not_owned:
            self.service.edit(self.idea.idea_id, {"title": "Hijack"}, self.reviewer)
        missing_id = uuid.uuid4()
        with self.assertRaises(IdeaNotFoundError) as missing:
            self.service.edit(missing_id, {"title": "Hijack"}, self.reviewer)

        self.assertEqual(type(not_owned.exception), type(missing.exception))
        self.assertEqual(
            str(not_owned.exception).replace(str(self.idea.idea_id), "<id>"),
            str(missing.exception).replace(str(missing_id), "<id>"),
        )
        self.idea.refresh_from_db()
        self.assertNotEqual(self.idea.title, "Hijack")

    def test_soft_deleted_idea_cannot_be_edited(self):
        Idea.objects.filter(idea_id=self.idea.idea_id).update(is_active=False)

        with self.assertRaises(IdeaNotFoundError):
            self.service.edit(self.idea.idea_id, {"title": "New"}, self.employee)


class TestSoftDelete(LifecycleTestCase):
    """Tests for IdeaLifecycleService.soft_delete."""

    def test_only_idea_removed_leaves_zero_points(self):
        idea = self.service.submit(draft(), self.employee)
        self.assertEqual(self.points(self.employee), 10)

        self.service.soft_delete(idea.idea_id, self.employee)

        stored = Idea.objects.get(idea_id=idea.idea_id)
        self.assertFalse(stored.is_active)
        self.assertEqual(self.points(self.employee), 0)

    def test_non_owner_cannot_delete(self):
        idea = make_idea(self.employee)

        with self.assertRaises(IdeaNotFoundError):
            self.service.soft_delete(idea.idea_id, self.reviewer)

        idea.refresh_from_db()
        self.assertTrue(idea.is_active)

    def test_deleting_twice_raises_not_found(self):
        idea = make_idea(self.employee)
        self.service.soft_delete(idea.idea_id, self.employee)

        with self.assertRaises(IdeaNotFoundError):
            self.service.soft_delete(idea.idea_id, self.employee)

    def test_deleted_idea_is_hidden_from_reads(self):
        idea = make_idea(self.employee)
        self.service.soft_delete(idea.idea_id, self.employee)

        with self.assertRaises(IdeaNotFoundError):
            self.service.get_idea(idea.idea_id)
        self.assertFalse(self.service.list_ideas().filter(idea_id=idea.idea_id))


class TestStoreFailures(LifecycleTestCase):
    """Database errors on the primary write surface as dependency failures."""

    def setUp(self):
        super().setUp()
        self.idea = make_idea(self.employee)

    @patch.object(IdeaRepository, "insert", side_effect=OperationalError("down"))
    def test_submit_reports_idea_insert(self, _mock_insert):
        with self.assertRaises(DependencyFailureError) as ctx:
            self.service.submit(draft(), self.employee)

        self.assertEqual(ctx.exception.step, "idea_insert")
        self.broadcaster.broadcast_ideas_changed.assert_not_called()
        self.assertFalse(Notification.objects.exists())

    @patch.object(IdeaRepository, "update_by_id", side_effect=OperationalError("down"))
    def test_change_status_reports_idea_status_update(self, _mock_update):
        with self.assertRaises(DependencyFailureError) as ctx:
            self.service.change_status(self.idea.idea_id, "approved", self.reviewer)

        self.assertEqual(ctx.exception.step, "idea_status_update")
        self.idea.refresh_from_db()
        self.assertEqual(self.idea.status, "under_review")

    @patch.object(
        IdeaRepository, "update_where_owned_by", side_effect=OperationalError("down")
    )
    def test_edit_and_delete_report_their_steps(self, _mock_update):
        with self.assertRaises(DependencyFailureError) as edit_ctx:
            self.service.edit(self.idea.idea_id, {"title": "New"}, self.employee)
        with self.assertRaises(DependencyFailureError) as delete_ctx:
            self.service.soft_delete(self.idea.idea_id, self.employee)

        self.assertEqual(edit_ctx.exception.step, "idea_update")
        self.assertEqual(delete_ctx.exception.step, "idea_soft_delete")

    def test_not_found_is_not_reported_as_dependency_failure(self):
        with self.assertRaises(IdeaNotFoundError):
            self.service.change_status(uuid.uuid4(), "approved", self.reviewer)


class TestCreditPointsScenario(LifecycleTestCase):
    """Credit points follow every mutation of an employee's ideas."""

    def test_points_track_full_lifecycle(self):
        first = self.service.submit(draft(), self.employee)
        self.assertEqual(self.points(self.employee), 10)

        self.service.change_status(first.idea_id, "approved", self.reviewer)
        self.assertEqual(self.points(self.employee), 20)

        self.service.change_status(first.idea_id, "implemented", self.reviewer)
        self.assertEqual(self.points(self.employee), 30)

        second = self.service.submit(draft(title="Second idea"), self.employee)
        self.assertEqual(self.points(self.employee), 40)

        self.service.soft_delete(second.idea_id, self.employee)
        self.assertEqual(self.points(self.employee), 30)

        credit_notifications = Notification.objects.filter(
            recipient=self.employee, type="credit_points_updated"
        )
        self.assertEqual(credit_notifications.count(), 5)


class TestReads(LifecycleTestCase):
    """Tests for the listing and statistics operations."""

    def test_list_filters_and_searches(self):
        make_idea(self.employee, title="Reduce scrap", department="Quality")
        make_idea(self.employee, title="Faster changeover", status="approved")
        make_idea(self.reviewer, problem="Scrap bins overflow", department="Finance")

        titles = {i.title for i in self.service.list_ideas(search="scrap")}
        approved = self.service.list_ideas(status="approved")
        quality = self.service.list_ideas(department="Quality")
        mine = self.service.list_ideas(submitted_by=self.employee.employee_number)

        self.assertEqual(len(titles), 2)
        self.assertIn("Reduce scrap", titles)
        self.assertEqual([i.title for i in approved], ["Faster changeover"])
        self.assertEqual([i.title for i in quality], ["Reduce scrap"])
        self.assertEqual(mine.count(), 2)

    def test_list_my_ideas(self):
        make_idea(self.employee, status="approved")
        make_idea(self.employee)
        make_idea(self.reviewer)

        self.assertEqual(self.service.list_my_ideas(self.employee).count(), 2)
        self.assertEqual(
            self.service.list_my_ideas(self.employee, status="approved").count(), 1
        )

    def test_stats_group_active_ideas(self):
        make_idea(
            self.employee,
            status="approved",
            department="Quality",
            benefit="safety",
            estimated_savings=Decimal("100.00"),
        )
        make_idea(
            self.employee,
            status="approved",
            department="Quality",
            benefit="quality",
            estimated_savings=Decimal("50.00"),
        )
        make_idea(self.employee, status="approved", is_active=False)

        stats = self.service.get_idea_stats()

        self.assertEqual(
            stats["status"],
            [{"key": "approved", "count": 2, "total_savings": Decimal("150.00")}],
        )
        self.assertEqual(stats["department"][0]["key"], "Quality")
        self.assertEqual(
            {row["key"]: row["count"] for row in stats["benefit"]},
            {"quality": 1, "safety": 1},
        )
