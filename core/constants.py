"""Constants used throughout the idea service application."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Performance Thresholds
SLOW_REQUEST_THRESHOLD = 1.0  # Log requests slower than 1 second

# Credit point value of an active idea, by its current status
IMPLEMENTED_POINTS = 30
APPROVED_POINTS = 20
DEFAULT_POINTS = 10

# Real-time signal telling clients to reload their idea lists
IDEAS_UPDATED_EVENT = "ideas_updated"

# Leaderboard
INDIVIDUAL_LEADERBOARD_LIMIT = 50

# Fields a submitter may change through the edit operation
EDITABLE_IDEA_FIELDS = (
    "title",
    "problem",
    "improvement",
    "benefit",
    "department",
    "estimated_savings",
    "tags",
)

# Fields an admin may change on a user account; credit points are derived
USER_ADMIN_EDITABLE_FIELDS = (
    "name",
    "email",
    "department",
    "designation",
    "role",
    "mobile_number",
    "is_active",
)
