"""Idea schemas."""

from core.schemas.idea.idea_image import IdeaImage
from core.schemas.idea.request.idea_create_request import IdeaCreateRequest
from core.schemas.idea.request.idea_list_params import IdeaListParams
from core.schemas.idea.request.idea_status_update_request import (
    IdeaStatusUpdateRequest,
)
from core.schemas.idea.request.idea_update_request import IdeaUpdateRequest
from core.schemas.idea.response.idea_detail import IdeaDetail
from core.schemas.idea.response.idea_stats_response import (
    IdeaStatsResponse,
    StatsBucket,
)

__all__ = [
    "IdeaCreateRequest",
    "IdeaDetail",
    "IdeaImage",
    "IdeaListParams",
    "IdeaStatsResponse",
    "IdeaStatusUpdateRequest",
    "IdeaUpdateRequest",
    "StatsBucket",
]
