"""Unit tests for NotificationRepository."""

from core.models import Notification
from core.repositories import NotificationRepository
from tests.base import BaseUnitTest
from tests.factories import make_notification, make_user


class TestNotificationRepository(BaseUnitTest):
    """Tests for NotificationRepository."""

    def setUp(self):
        self.recipient = make_user()

    def _build(self, **overrides):
        fields = {
            "recipient": self.recipient,
            "recipient_employee_number": self.recipient.employee_number,
            "type": "idea_approved",
            "title": "Idea Approved",
            "message": "Approved",
        }
        fields.update(overrides)
        return Notification(**fields)

    def test_insert_one(self):
        notification = NotificationRepository.insert_one(self._build())

        self.assertTrue(
            Notification.objects.filter(
                notification_id=notification.notification_id
            ).exists()
        )

    def test_insert_many(self):
        created = NotificationRepository.insert_many(
            [self._build(title=f"n{i}") for i in range(3)]
        )

        self.assertEqual(len(created), 3)
        self.assertEqual(Notification.objects.count(), 3)

    def test_mark_read_requires_ownership(self):
        notification = make_notification(self.recipient)
        other = make_user()

        self.assertIsNone(
            NotificationRepository.mark_read(
                notification.notification_id, other.user_id
            )
        )
        marked = NotificationRepository.mark_read(
            notification.notification_id, self.recipient.user_id
        )

        self.assertTrue(marked.is_read)
        self.assertIsNotNone(marked.read_at)

    def test_mark_all_read_and_count_unread(self):
        for _ in range(2):
            make_notification(self.recipient)
        make_notification(self.recipient, is_read=True)

        self.assertEqual(NotificationRepository.count_unread(self.recipient.user_id), 2)
        updated = NotificationRepository.mark_all_read(self.recipient.user_id)
        self.assertEqual(updated, 2)
        self.assertEqual(NotificationRepository.count_unread(self.recipient.user_id), 0)
