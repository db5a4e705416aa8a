"""Recalculate credit points for one employee or for everyone."""

from django.core.management.base import BaseCommand, CommandError

from core.exceptions import UserNotFoundError
from core.repositories import UserRepository
from core.services import credit_service

REASON = "Credit points recalculated by administrator"


class Command(BaseCommand):
    """Rescore users from their active ideas and persist the result."""

    help = "Recalculate credit points for all users or a single employee"

    def add_arguments(self, parser):
        parser.add_argument(
            "--employee-number",
            dest="employee_number",
            help="Only recalculate the employee with this employee number",
        )

    def handle(self, *args, **options):
        employee_number = options.get("employee_number")

        if not employee_number:
            changed = credit_service.recalculate_all(REASON)
            self.stdout.write(
                self.style.SUCCESS(f"Recalculated all users, {changed} changed")
            )
            return

        user = UserRepository.find_by_natural_key(employee_number)
        if user is None:
            raise CommandError(f"No user with employee number {employee_number}")

        try:
            result = credit_service.recalculate(user.user_id, REASON)
        except UserNotFoundError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(
            self.style.SUCCESS(
                f"{employee_number}: {result.old_points} -> {result.new_points}"
            )
        )
