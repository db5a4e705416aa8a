"""API views for core application."""

from uuid import UUID

import structlog
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth.context import set_current_user
from core.auth.jwt_auth import JWTAuthentication
from core.auth.permissions import IsAdmin, IsReviewer
from core.jobs.credit_jobs import enqueue_recalculate_all
from core.pagination import StandardPageNumberPagination
from core.schemas import (
    CreditRecalculationResponse,
    DepartmentLeaderboardEntry,
    IdeaCreateRequest,
    IdeaDetail,
    IdeaListParams,
    IdeaStatsResponse,
    IdeaStatusUpdateRequest,
    IdeaUpdateRequest,
    LeaderboardEntry,
    LeaderboardParams,
    MarkAllReadResponse,
    NotificationDetail,
    NotificationListParams,
    ReconciliationQueuedResponse,
    UserCreateRequest,
    UserDetail,
    UserListParams,
    UserUpdateRequest,
)
from core.services import (
    credit_service,
    health_service,
    idea_lifecycle_service,
    leaderboard_service,
    user_admin_service,
    user_notification_service,
)

logger = structlog.get_logger(__name__)


def _parse_uuid(value: str, label: str) -> UUID:
    """Parse a path parameter as a UUID.

    Raises:
        ParseError: If the value is not a valid UUID (400).
    """
    try:
        return UUID(value)
    except ValueError as e:
        logger.warning("Invalid identifier format", label=label, value=value)
        raise ParseError(f"Invalid {label} format") from e


class SecurityContextMixin:
    """Publish the authenticated employee to the thread-local context.

    DRF authenticates inside ``initial``, after middleware has run, so the
    context is populated here. ``SecurityContextMiddleware`` clears it.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        if request.user and request.user.is_authenticated:
            set_current_user(request.user)


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.

    This endpoint is exempt from authentication to allow Kubernetes probes.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 with a degraded status when the database or cache is
    unavailable, so the service stays alive while it reconnects.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(), status=status.HTTP_200_OK)


class IdeaListCreateView(SecurityContextMixin, APIView):
    """API endpoint for listing and submitting ideas.

    GET: Paginated list of active ideas, newest first
    POST: Submit a new idea
    """

    def get(self, request):
        """List active ideas.

        Query parameters:
        - status, department, benefit: Exact filters (optional)
        - submittedBy: Employee number of the submitter (optional)
        - search: Case-insensitive text in title, problem or improvement
        - page, page_size: Pagination (default 20, max 100)

        Returns:
            Paginated list of ideas
        """
        params = IdeaListParams(**request.query_params.dict())
        queryset = idea_lifecycle_service.list_ideas(**params.model_dump())
        return _paginated_ideas(queryset, request, self)

    def post(self, request):
        """Submit a new idea for the authenticated employee.

        Returns:
            201 Created with the idea
            400 Bad Request if validation fails
        """
        body = IdeaCreateRequest(**request.data)
        idea = idea_lifecycle_service.submit(
            draft=body.model_dump(exclude={"images"}),
            submitter=request.user,
            images=[image.model_dump() for image in body.images],
        )
        return Response(
            IdeaDetail.model_validate(idea).model_dump(),
            status=status.HTTP_201_CREATED,
        )


class MyIdeasView(SecurityContextMixin, APIView):
    """API endpoint listing the authenticated employee's own ideas."""

    def get(self, request):
        """List the caller's active ideas, optionally filtered by status."""
        params = IdeaListParams(**request.query_params.dict())
        queryset = idea_lifecycle_service.list_my_ideas(
            request.user, status=params.status
        )
        return _paginated_ideas(queryset, request, self)


class IdeaStatsView(SecurityContextMixin, APIView):
    """API endpoint for idea statistics."""

    def get(self, _request):
        """Return active idea counts by status, department and benefit."""
        stats = IdeaStatsResponse.model_validate(
            idea_lifecycle_service.get_idea_stats()
        )
        return Response(stats.model_dump(), status=status.HTTP_200_OK)


class IdeaDetailView(SecurityContextMixin, APIView):
    """API endpoint for a single idea.

    GET: Retrieve an active idea
    PUT: Edit an idea the caller owns
    DELETE: Soft-delete an idea the caller owns
    """

    def get(self, _request, idea_id):
        """Retrieve an active idea by ID.

        Returns:
            200 OK with the idea
            404 Not Found if the idea does not exist or was deleted
        """
        idea = idea_lifecycle_service.get_idea(_parse_uuid(idea_id, "idea ID"))
        return Response(
            IdeaDetail.model_validate(idea).model_dump(),
            status=status.HTTP_200_OK,
        )

    def put(self, request, idea_id):
        """Edit the caller's idea.

        Only fields present in the body change. Ideas owned by someone else
        are reported as not found.

        Returns:
            200 OK with the updated idea
            400 Bad Request if validation fails
            404 Not Found if the idea does not exist or is not the caller's
        """
        body = IdeaUpdateRequest(**request.data)
        idea = idea_lifecycle_service.edit(
            _parse_uuid(idea_id, "idea ID"),
            body.model_dump(exclude_unset=True),
            request.user,
        )
        return Response(
            IdeaDetail.model_validate(idea).model_dump(),
            status=status.HTTP_200_OK,
        )

    def delete(self, request, idea_id):
        """Soft-delete the caller's idea.

        Returns:
            204 No Content if the idea was deleted
            404 Not Found if the idea does not exist or is not the caller's
        """
        idea_lifecycle_service.soft_delete(
            _parse_uuid(idea_id, "idea ID"), request.user
        )
        return Response(status=status.HTTP_204_NO_CONTENT)


class IdeaStatusView(SecurityContextMixin, APIView):
    """API endpoint for reviewers to change an idea's status."""

    permission_classes = (IsAuthenticated, IsReviewer)

    def put(self, request, idea_id):
        """Move an idea to a new status.

        Returns:
            200 OK with the updated idea
            400 Bad Request if validation fails
            403 Forbidden if the caller is not a reviewer or admin
            404 Not Found if the idea does not exist
        """
        body = IdeaStatusUpdateRequest(**request.data)
        idea = idea_lifecycle_service.change_status(
            _parse_uuid(idea_id, "idea ID"),
            body.status,
            request.user,
            review_comments=body.review_comments,
            actual_savings=body.actual_savings,
        )
        return Response(
            IdeaDetail.model_validate(idea).model_dump(),
            status=status.HTTP_200_OK,
        )

    patch = put


class NotificationListView(SecurityContextMixin, APIView):
    """API endpoint listing the caller's notifications."""

    def get(self, request):
        """List the caller's notifications, newest first.

        Query parameters:
        - isRead: Filter by read state (optional)
        - page, page_size: Pagination (default 20, max 100)

        Returns:
            Paginated notifications plus the caller's unread count
        """
        params = NotificationListParams(**request.query_params.dict())
        queryset = user_notification_service.list_notifications(
            request.user, is_read=params.is_read
        )

        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(queryset, request, view=self) or []
        response = paginator.get_paginated_response(
            [NotificationDetail.model_validate(n).model_dump() for n in page]
        )
        response.data["unread_count"] = user_notification_service.unread_count(
            request.user
        )
        return response


class NotificationReadView(SecurityContextMixin, APIView):
    """API endpoint marking one notification as read."""

    def put(self, request, notification_id):
        """Mark the caller's notification as read.

        Returns:
            200 OK with the notification
            404 Not Found if it does not exist or belongs to someone else
        """
        notification = user_notification_service.mark_as_read(
            _parse_uuid(notification_id, "notification ID"), request.user
        )
        return Response(
            NotificationDetail.model_validate(notification).model_dump(),
            status=status.HTTP_200_OK,
        )

    patch = put


class NotificationReadAllView(SecurityContextMixin, APIView):
    """API endpoint marking all of the caller's notifications as read."""

    def put(self, request):
        updated = user_notification_service.mark_all_as_read(request.user)
        return Response(
            MarkAllReadResponse(updated_count=updated).model_dump(),
            status=status.HTTP_200_OK,
        )

    patch = put


class LeaderboardView(SecurityContextMixin, APIView):
    """API endpoint for the individual and department leaderboards."""

    def get(self, request):
        """Return a leaderboard.

        Query parameters:
        - type: individual (default) or department
        - limit: Individual entries to return (default and max 50)
        """
        params = LeaderboardParams(**request.query_params.dict())
        if params.type == "department":
            entries = [
                DepartmentLeaderboardEntry.model_validate(entry).model_dump()
                for entry in leaderboard_service.department()
            ]
        else:
            entries = [
                LeaderboardEntry.model_validate(entry).model_dump()
                for entry in leaderboard_service.individual(limit=params.limit)
            ]
        return Response(
            {"type": params.type, "leaderboard": entries},
            status=status.HTTP_200_OK,
        )


class UserCreditRecalculationView(SecurityContextMixin, APIView):
    """API endpoint for admins to recalculate one user's credit points."""

    permission_classes = (IsAuthenticated, IsAdmin)

    def post(self, request, user_id):
        """Recalculate a user's credit points now.

        Returns:
            200 OK with the old and new values
            404 Not Found if the user does not exist
        """
        result = credit_service.recalculate(
            _parse_uuid(user_id, "user ID"),
            "Manual recalculation by admin",
            actor=request.user,
        )
        response = CreditRecalculationResponse(
            user_id=result.user.user_id,
            employee_number=result.user.employee_number,
            old_points=result.old_points,
            new_points=result.new_points,
            changed=result.changed,
        )
        return Response(response.model_dump(), status=status.HTTP_200_OK)


class CreditReconciliationView(SecurityContextMixin, APIView):
    """API endpoint for admins to recalculate every user's credit points."""

    permission_classes = (IsAuthenticated, IsAdmin)

    def post(self, request):
        """Queue a full reconciliation job.

        Returns:
            202 Accepted with the job ID
        """
        job = enqueue_recalculate_all(requested_by=request.user.employee_number)
        return Response(
            ReconciliationQueuedResponse(job_id=job.id).model_dump(),
            status=status.HTTP_202_ACCEPTED,
        )


class UserListCreateView(SecurityContextMixin, APIView):
    """API endpoint for admins to list and create user accounts.

    GET: Paginated list of users, ordered by name
    POST: Create a user account
    """

    permission_classes = (IsAuthenticated, IsAdmin)

    def get(self, request):
        """List user accounts.

        Query parameters:
        - department, role: Exact filters (optional)
        - isActive: Account state (default true)
        - search: Case-insensitive text in name, employee number or email
        - page, page_size: Pagination (default 20, max 100)
        """
        params = UserListParams(**request.query_params.dict())
        queryset = user_admin_service.list_users(**params.model_dump())
        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(queryset, request, view=self) or []
        return paginator.get_paginated_response(
            [UserDetail.model_validate(user).model_dump() for user in page]
        )

    def post(self, request):
        """Create a user account with zero credit points.

        Returns:
            201 Created with the account
            400 Bad Request if validation fails
            409 Conflict if the employee number or email is taken
        """
        body = UserCreateRequest(**request.data)
        user = user_admin_service.create_user(body.model_dump(), request.user)
        return Response(
            UserDetail.model_validate(user).model_dump(),
            status=status.HTTP_201_CREATED,
        )


class UserDetailView(SecurityContextMixin, APIView):
    """API endpoint for admins to read, update and deactivate one account."""

    permission_classes = (IsAuthenticated, IsAdmin)

    def get(self, request, user_id):
        """Return a user account, active or not."""
        user = user_admin_service.get_user(_parse_uuid(user_id, "user ID"))
        return Response(
            UserDetail.model_validate(user).model_dump(),
            status=status.HTTP_200_OK,
        )

    def put(self, request, user_id):
        """Update account fields present in the body.

        Credit points and the employee number cannot be changed.

        Returns:
            200 OK with the updated account
            400 Bad Request if validation fails
            404 Not Found if the user does not exist
            409 Conflict if the email is taken or an admin deactivates
                themselves
        """
        body = UserUpdateRequest(**request.data)
        user = user_admin_service.update_user(
            _parse_uuid(user_id, "user ID"),
            body.model_dump(exclude_unset=True),
            request.user,
        )
        return Response(
            UserDetail.model_validate(user).model_dump(),
            status=status.HTTP_200_OK,
        )

    def delete(self, request, user_id):
        """Deactivate a user account. Accounts are never removed.

        Returns:
            204 No Content once the account is inactive
            404 Not Found if the user does not exist
            409 Conflict if an admin deactivates themselves
        """
        user_admin_service.deactivate_user(
            _parse_uuid(user_id, "user ID"), request.user
        )
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProfileView(SecurityContextMixin, APIView):
    """API endpoint returning the authenticated user's own account."""

    def get(self, request):
        """Return the caller's account with current credit points."""
        user = user_admin_service.get_profile(request.user)
        return Response(
            UserDetail.model_validate(user).model_dump(),
            status=status.HTTP_200_OK,
        )


def _paginated_ideas(queryset, request, view):
    paginator = StandardPageNumberPagination()
    page = paginator.paginate_queryset(queryset, request, view=view) or []
    return paginator.get_paginated_response(
        [IdeaDetail.model_validate(idea).model_dump() for idea in page]
    )
