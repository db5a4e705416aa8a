"""Unit tests for UserRepository."""

import uuid

from django.db import transaction

from core.enums import UserRole
from core.repositories import UserRepository
from tests.base import BaseUnitTest
from tests.factories import make_user


class TestUserRepository(BaseUnitTest):
    """Tests for UserRepository."""

    def test_find_by_natural_key(self):
        user = make_user(employee_number="EMP00042")

        self.assertEqual(UserRepository.find_by_natural_key("EMP00042"), user)
        self.assertIsNone(UserRepository.find_by_natural_key("EMP99999"))

    def test_find_by_id_for_update_inside_transaction(self):
        user = make_user()

        with transaction.atomic():
            locked = UserRepository.find_by_id_for_update(user.user_id)

        self.assertEqual(locked, user)

    def test_update_credit_points_persists_value(self):
        user = make_user(credit_points=10)

        updated = UserRepository.update_credit_points(user.user_id, 40)

        self.assertEqual(updated.credit_points, 40)
        user.refresh_from_db()
        self.assertEqual(user.credit_points, 40)

    def test_update_credit_points_of_unknown_user(self):
        self.assertIsNone(UserRepository.update_credit_points(uuid.uuid4(), 10))

    def test_find_active_by_roles(self):
        admin = make_user(role=UserRole.ADMIN.value)
        reviewer = make_user(role=UserRole.REVIEWER.value)
        make_user(role=UserRole.REVIEWER.value, is_active=False)
        make_user(role=UserRole.EMPLOYEE.value)

        result = UserRepository.find_active_by_roles(
            [UserRole.ADMIN.value, UserRole.REVIEWER.value]
        )

        self.assertCountEqual(result, [admin, reviewer])

    def test_find_all_includes_inactive(self):
        make_user()
        make_user(is_active=False)

        self.assertEqual(UserRepository.find_all().count(), 2)

    def test_find_by_id_includes_inactive(self):
        user = make_user(is_active=False)

        self.assertEqual(UserRepository.find_by_id(user.user_id), user)
        self.assertIsNone(UserRepository.find_by_id(uuid.uuid4()))

    def test_search_by_role_and_text(self):
        reviewer = make_user(role=UserRole.REVIEWER.value, name="Marta Okafor")
        make_user(role=UserRole.REVIEWER.value, name="Ivo Brandt")
        make_user(role=UserRole.EMPLOYEE.value, name="Marta Silva")

        result = UserRepository.search(role=UserRole.REVIEWER.value, search="marta")

        self.assertEqual(list(result), [reviewer])

    def test_email_in_use_ignores_the_excluded_account(self):
        user = make_user(email="dana@example.com")

        self.assertTrue(UserRepository.email_in_use("DANA@example.com"))
        self.assertFalse(
            UserRepository.email_in_use(
                "dana@example.com", exclude_user_id=user.user_id
            )
        )

    def test_insert_and_update_never_write_credit_points(self):
        user = UserRepository.insert(
            employee_number="EMP31337",
            name="Lee Park",
            department="HR",
            credit_points=70,
        )

        updated = UserRepository.update_by_id(
            user.user_id, {"name": "Lee Park-Moss", "credit_points": 70}
        )

        user.refresh_from_db()
        self.assertEqual(updated.name, "Lee Park-Moss")
        self.assertEqual(user.name, "Lee Park-Moss")
        self.assertEqual(user.credit_points, 0)
        self.assertIsNone(UserRepository.update_by_id(uuid.uuid4(), {"name": "x"}))
