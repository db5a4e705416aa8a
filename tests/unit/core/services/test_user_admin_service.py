"""Unit tests for core.services.user_admin_service."""

import uuid
from unittest.mock import patch

from django.db import OperationalError

from core.exceptions import ConflictError, DependencyFailureError, UserNotFoundError
from core.models import User
from core.repositories import UserRepository
from core.services.user_admin_service import UserAdminService
from tests.base import BaseUnitTest
from tests.factories import make_idea, make_user


def account(**overrides):
    fields = {
        "employee_number": "EMP90001",
        "name": "Priya Raman",
        "email": "priya.raman@example.com",
        "department": "Quality",
        "designation": "Quality Engineer",
        "role": "employee",
        "mobile_number": "",
    }
    fields.update(overrides)
    return fields


class TestUserAdminService(BaseUnitTest):
    """Tests for UserAdminService."""

    def setUp(self):
        self.service = UserAdminService()
        self.admin = make_user(role="admin", department="Administration")

    def test_create_starts_with_zero_credit_points(self):
        user = self.service.create_user(account(credit_points=500), self.admin)

        stored = User.objects.get(user_id=user.user_id)
        self.assertEqual(stored.employee_number, "EMP90001")
        self.assertEqual(stored.credit_points, 0)
        self.assertTrue(stored.is_active)

    def test_duplicate_employee_number_conflicts(self):
        make_user(employee_number="EMP90001")

        with self.assertRaises(ConflictError) as ctx:
            self.service.create_user(account(), self.admin)

        self.assertEqual(ctx.exception.detail, "employee_number")

    def test_duplicate_email_conflicts_case_insensitively(self):
        make_user(email="Priya.Raman@example.com")

        with self.assertRaises(ConflictError) as ctx:
            self.service.create_user(account(), self.admin)

        self.assertEqual(ctx.exception.detail, "email")
        self.assertFalse(User.objects.filter(employee_number="EMP90001").exists())

    def test_update_ignores_credit_points_and_employee_number(self):
        user = make_user(credit_points=20)
        make_idea(user, status="approved")

        updated = self.service.update_user(
            user.user_id,
            {
                "designation": "Line Lead",
                "credit_points": 9999,
                "employee_number": "HIJACK",
            },
            self.admin,
        )

        user.refresh_from_db()
        self.assertEqual(updated.designation, "Line Lead")
        self.assertEqual(user.designation, "Line Lead")
        self.assertEqual(user.credit_points, 20)
        self.assertNotEqual(user.employee_number, "HIJACK")

    def test_update_rejects_email_of_another_account(self):
        other = make_user(email="taken@example.com")
        user = make_user()

        with self.assertRaises(ConflictError):
            self.service.update_user(
                user.user_id, {"email": "taken@example.com"}, self.admin
            )
        self.service.update_user(
            other.user_id, {"email": "taken@example.com"}, self.admin
        )

    def test_update_unknown_user_raises_not_found(self):
        with self.assertRaises(UserNotFoundError):
            self.service.update_user(uuid.uuid4(), {"name": "Ghost"}, self.admin)

    def test_deactivate_keeps_account_and_ideas(self):
        user = make_user(credit_points=10)
        idea = make_idea(user)

        self.service.deactivate_user(user.user_id, self.admin)
        self.service.deactivate_user(user.user_id, self.admin)

        user.refresh_from_db()
        idea.refresh_from_db()
        self.assertFalse(user.is_active)
        self.assertEqual(user.credit_points, 10)
        self.assertTrue(idea.is_active)

    def test_admin_cannot_deactivate_themselves(self):
        with self.assertRaises(ConflictError):
            self.service.deactivate_user(self.admin.user_id, self.admin)
        with self.assertRaises(ConflictError):
            self.service.update_user(
                self.admin.user_id, {"is_active": False}, self.admin
            )

        self.admin.refresh_from_db()
        self.assertTrue(self.admin.is_active)

    def test_list_filters_and_orders_by_name(self):
        make_user(name="Bea", department="Finance")
        make_user(name="Abe", department="Finance")
        make_user(name="Cal", department="Finance", is_active=False)
        make_user(name="Dee", department="HR")

        names = [
            user.name for user in self.service.list_users(department="Finance")
        ]
        inactive = self.service.list_users(department="Finance", is_active=False)

        self.assertEqual(names, ["Abe", "Bea"])
        self.assertEqual([user.name for user in inactive], ["Cal"])

    def test_list_search_matches_employee_number(self):
        user = make_user(employee_number="EMP77777")

        results = list(self.service.list_users(search="77777"))

        self.assertEqual(results, [user])

    def test_get_user_includes_inactive_accounts(self):
        user = make_user(is_active=False)

        self.assertEqual(self.service.get_user(user.user_id), user)
        with self.assertRaises(UserNotFoundError):
            self.service.get_user(uuid.uuid4())

    def test_profile_reflects_stored_credit_points(self):
        user = make_user()
        User.objects.filter(user_id=user.user_id).update(credit_points=40)

        profile = self.service.get_profile(user)

        self.assertEqual(profile.credit_points, 40)

    @patch.object(UserRepository, "update_by_id", side_effect=OperationalError("down"))
    def test_store_failure_reports_dependency_failure(self, _mock_update):
        user = make_user()

        with self.assertRaises(DependencyFailureError) as ctx:
            self.service.deactivate_user(user.user_id, self.admin)

        self.assertEqual(ctx.exception.step, "user_deactivate")
