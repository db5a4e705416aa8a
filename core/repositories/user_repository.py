"""Repository for user-related database queries."""

from collections.abc import Iterable
from uuid import UUID

from django.db.models import Q, QuerySet

from core.models import User


class UserRepository:
    """Repository for encapsulating user database queries.

    ``update_credit_points`` is called only by the credit recalculation
    service. Account writes from user administration go through ``insert``
    and ``update_by_id``, which never touch credit points.
    """

    @staticmethod
    def find_by_id(user_id: UUID | str) -> User | None:
        """Look up a user by primary key.

        Args:
            user_id: UUID of the user

        Returns:
            The User, or None if it does not exist
        """
        return User.objects.filter(user_id=user_id).first()

    @staticmethod
    def find_by_id_for_update(user_id: UUID | str) -> User | None:
        """Look up a user and lock its row until the transaction ends.

        Must be called inside ``transaction.atomic()``. Concurrent callers
        for the same user block here, which serializes credit point
        recalculations per user.

        Args:
            user_id: UUID of the user

        Returns:
            The locked User, or None if it does not exist
        """
        return User.objects.select_for_update().filter(user_id=user_id).first()

    @staticmethod
    def find_by_natural_key(employee_number: str) -> User | None:
        """Look up a user by employee number.

        Args:
            employee_number: The user's unique employee number

        Returns:
            The User, or None if it does not exist
        """
        return User.objects.filter(employee_number=employee_number).first()

    @staticmethod
    def update_credit_points(user_id: UUID | str, new_value: int) -> User | None:
        """Persist a user's credit points.

        The write happens even when the value is unchanged so ``updated_at``
        reflects the latest recalculation.

        Args:
            user_id: UUID of the user
            new_value: Recalculated credit points

        Returns:
            The updated User, or None if it does not exist
        """
        user = User.objects.filter(user_id=user_id).first()
        if user is None:
            return None
        user.credit_points = new_value
        user.save(update_fields=["credit_points", "updated_at"])
        return user

    @staticmethod
    def find_active_by_roles(roles: Iterable[str]) -> list[User]:
        """Return active users holding any of the given roles.

        Args:
            roles: UserRole values to match

        Returns:
            List of matching active users
        """
        return list(User.objects.filter(role__in=list(roles), is_active=True))

    @staticmethod
    def find_all() -> QuerySet[User]:
        """Return all users, active or not."""
        return User.objects.all().order_by("employee_number")

    @staticmethod
    def search(
        department: str | None = None,
        role: str | None = None,
        is_active: bool | None = True,
        search: str | None = None,
    ) -> QuerySet[User]:
        """Filter users for the admin listing, ordered by name.

        Args:
            department: Exact department to match
            role: Exact role to match
            is_active: Account state to match, or None for both
            search: Case-insensitive text in name, employee number or email

        Returns:
            QuerySet of matching users
        """
        queryset = User.objects.all()
        if department:
            queryset = queryset.filter(department=department)
        if role:
            queryset = queryset.filter(role=role)
        if is_active is not None:
            queryset = queryset.filter(is_active=is_active)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search)
                | Q(employee_number__icontains=search)
                | Q(email__icontains=search)
            )
        return queryset.order_by("name", "employee_number")

    @staticmethod
    def email_in_use(email: str, exclude_user_id: UUID | str | None = None) -> bool:
        """Check whether another account already uses an email address.

        Args:
            email: Address to look for, compared case-insensitively
            exclude_user_id: Account to ignore, used when updating

        Returns:
            True if a different user has the address
        """
        queryset = User.objects.filter(email__iexact=email)
        if exclude_user_id is not None:
            queryset = queryset.exclude(user_id=exclude_user_id)
        return queryset.exists()

    @staticmethod
    def insert(**fields) -> User:
        """Create a user account.

        Args:
            **fields: Model field values; credit points always start at zero

        Returns:
            The created User
        """
        fields.pop("credit_points", None)
        return User.objects.create(**fields)

    @staticmethod
    def update_by_id(user_id: UUID | str, patch: dict) -> User | None:
        """Apply account field changes to a user.

        Args:
            user_id: UUID of the user
            patch: Field values to set; ``credit_points`` is ignored

        Returns:
            The updated User, or None if it does not exist
        """
        user = User.objects.filter(user_id=user_id).first()
        if user is None:
            return None
        fields = [name for name in patch if name != "credit_points"]
        for name in fields:
            setattr(user, name, patch[name])
        user.save(update_fields=[*fields, "updated_at"])
        return user
