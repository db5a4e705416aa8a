"""Service for administering employee accounts.

Admins list, create, update and deactivate accounts here. Accounts are
never deleted; deactivation hides the user from authentication and
leaderboards while keeping their ideas. Credit points are derived from
ideas and can only change through the credit recalculation service, so no
operation in this module writes them.
"""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

import structlog

from core.constants import USER_ADMIN_EDITABLE_FIELDS
from core.exceptions import ConflictError, UserNotFoundError
from core.models import User
from core.repositories import UserRepository
from core.services.effects import store_step

logger = structlog.get_logger(__name__)


class UserAdminService:
    """Service for admin account management and profile lookups."""

    def __init__(
        self,
        user_repository: type[UserRepository] = UserRepository,
    ) -> None:
        self.users = user_repository

    def list_users(
        self,
        department: str | None = None,
        role: str | None = None,
        is_active: bool | None = True,
        search: str | None = None,
    ) -> QuerySet[User]:
        """Get users matching the filters, ordered by name."""
        return self.users.search(
            department=department, role=role, is_active=is_active, search=search
        )

    def get_user(self, user_id: UUID | str) -> User:
        """Get a user account, active or not.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        user = self.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    def create_user(self, fields: Mapping[str, Any], actor: User) -> User:
        """Create an employee account.

        Args:
            fields: Validated account fields.
            actor: Admin creating the account.

        Returns:
            The created user with zero credit points.

        Raises:
            ConflictError: If the employee number or email is already used.
        """
        employee_number = fields["employee_number"]
        if self.users.find_by_natural_key(employee_number) is not None:
            raise ConflictError(
                "Employee number or email already exists", detail="employee_number"
            )
        if fields.get("email") and self.users.email_in_use(fields["email"]):
            raise ConflictError(
                "Employee number or email already exists", detail="email"
            )

        with store_step("user_insert"):
            try:
                with transaction.atomic():
                    user = self.users.insert(**dict(fields))
            except IntegrityError as e:
                raise ConflictError(
                    "Employee number or email already exists",
                    detail="employee_number",
                ) from e

        logger.info(
            "user_created",
            user_id=str(user.user_id),
            employee_number=user.employee_number,
            role=user.role,
            created_by=actor.employee_number,
        )
        return user

    def update_user(
        self, user_id: UUID | str, updates: Mapping[str, Any], actor: User
    ) -> User:
        """Change account fields of a user.

        Keys outside the editable set, such as credit points or the employee
        number, are ignored.

        Args:
            user_id: UUID of the user.
            updates: Field values to set.
            actor: Admin making the change.

        Returns:
            The updated user.

        Raises:
            UserNotFoundError: If the user does not exist.
            ConflictError: If the new email is used by another account, or an
                admin tries to deactivate their own account.
        """
        patch = {
            key: updates[key] for key in USER_ADMIN_EDITABLE_FIELDS if key in updates
        }
        if patch.get("is_active") is False:
            self._check_not_self(user_id, actor)
        if patch.get("email") and self.users.email_in_use(
            patch["email"], exclude_user_id=user_id
        ):
            raise ConflictError(
                "Employee number or email already exists", detail="email"
            )

        with store_step("user_update"):
            user = self.users.update_by_id(user_id, patch)
        if user is None:
            raise UserNotFoundError(str(user_id))

        logger.info(
            "user_updated",
            user_id=str(user.user_id),
            updated_fields=sorted(patch),
            updated_by=actor.employee_number,
        )
        return user

    def deactivate_user(self, user_id: UUID | str, actor: User) -> User:
        """Mark a user account as inactive.

        Deactivating an inactive account succeeds without change.

        Raises:
            UserNotFoundError: If the user does not exist.
            ConflictError: If an admin tries to deactivate their own account.
        """
        self._check_not_self(user_id, actor)
        with store_step("user_deactivate"):
            user = self.users.update_by_id(user_id, {"is_active": False})
        if user is None:
            raise UserNotFoundError(str(user_id))

        logger.info(
            "user_deactivated",
            user_id=str(user.user_id),
            employee_number=user.employee_number,
            deactivated_by=actor.employee_number,
        )
        return user

    def get_profile(self, user: User) -> User:
        """Reload the caller's own account so credit points are current."""
        return self.get_user(user.user_id)

    @staticmethod
    def _check_not_self(user_id: UUID | str, actor: User) -> None:
        if str(user_id) == str(actor.user_id):
            raise ConflictError("Admins cannot deactivate their own account")


# Global service instance
user_admin_service = UserAdminService()
