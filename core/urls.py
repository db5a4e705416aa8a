"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    CreditReconciliationView,
    IdeaDetailView,
    IdeaListCreateView,
    IdeaStatsView,
    IdeaStatusView,
    LeaderboardView,
    LivenessCheckView,
    MyIdeasView,
    NotificationListView,
    NotificationReadAllView,
    NotificationReadView,
    ProfileView,
    ReadinessCheckView,
    UserCreditRecalculationView,
    UserDetailView,
    UserListCreateView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Idea endpoints (specific routes before ideas/<idea_id>)
    path("ideas", IdeaListCreateView.as_view(), name="idea-list"),
    path("ideas/mine", MyIdeasView.as_view(), name="idea-mine"),
    path("ideas/stats", IdeaStatsView.as_view(), name="idea-stats"),
    path(
        "ideas/<str:idea_id>/status",
        IdeaStatusView.as_view(),
        name="idea-status",
    ),
    path("ideas/<str:idea_id>", IdeaDetailView.as_view(), name="idea-detail"),
    # Notification endpoints
    path(
        "notifications",
        NotificationListView.as_view(),
        name="notification-list",
    ),
    path(
        "notifications/read-all",
        NotificationReadAllView.as_view(),
        name="notification-read-all",
    ),
    path(
        "notifications/<str:notification_id>/read",
        NotificationReadView.as_view(),
        name="notification-read",
    ),
    # Auth endpoints
    path("auth/profile", ProfileView.as_view(), name="auth-profile"),
    # User endpoints (specific routes before users/<user_id>)
    path("users", UserListCreateView.as_view(), name="user-list"),
    path("users/leaderboard", LeaderboardView.as_view(), name="leaderboard"),
    path(
        "users/recalculate-credit-points",
        CreditReconciliationView.as_view(),
        name="credit-reconciliation",
    ),
    path(
        "users/<str:user_id>/recalculate-credit-points",
        UserCreditRecalculationView.as_view(),
        name="user-credit-recalculation",
    ),
    path("users/<str:user_id>", UserDetailView.as_view(), name="user-detail"),
]
