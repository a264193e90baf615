# Domain Layer
# ============
# Pure business rules over in-memory lists. No I/O, no global state.

from .models import (
    Client,
    ClientReviewHistory,
    Industry,
    RequestStatus,
    ReviewPlatform,
    ReviewRequest,
    ReviewRequestDraft,
)
from .errors import (
    ReviewCompassError,
    IncompleteSelectionError,
    ClientNotFoundError,
    InvalidStatusTransition,
    GatewayError,
    DispatchError,
)
from .platforms import list_platforms, get_platform
from .industries import list_industries, get_industry
from .history import available_platforms, build_review_history, ready_for_outreach
from .recommendation import recommend_platform, is_recommendation_available
from .composer import default_message, compose_request
from .stats import RequestStats, request_stats

__all__ = [
    "Client",
    "ClientReviewHistory",
    "Industry",
    "RequestStatus",
    "ReviewPlatform",
    "ReviewRequest",
    "ReviewRequestDraft",
    "ReviewCompassError",
    "IncompleteSelectionError",
    "ClientNotFoundError",
    "InvalidStatusTransition",
    "GatewayError",
    "DispatchError",
    "list_platforms",
    "get_platform",
    "list_industries",
    "get_industry",
    "available_platforms",
    "build_review_history",
    "ready_for_outreach",
    "recommend_platform",
    "is_recommendation_available",
    "default_message",
    "compose_request",
    "RequestStats",
    "request_stats",
]
