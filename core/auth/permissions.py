"""DRF permission classes based on the employee role."""

from rest_framework.permissions import BasePermission


class IsReviewer(BasePermission):
    """Allow reviewers and admins."""

    message = "Requires reviewer or admin role"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_reviewer)


class IsAdmin(BasePermission):
    """Allow admins only."""

    message = "Requires admin role"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)
