"""
Recommendation Rule - Next Platform To Ask For
===============================================

Rule order:
1. No completed Google review yet -> Google, always.
2. Skilled trades / home services -> Angi.
3. Beauty / wellness -> Yelp.
4. Anything else -> Yelp.

NOTE: the rule does not look at the client's available platforms, so it can
point at a platform that was already requested (e.g. Google sent but not yet
completed). Callers that need to know can use is_recommendation_available().
"""

import logging
from typing import Optional, Sequence, Union

from .models import ClientReviewHistory, Industry, ReviewPlatform
from .platforms import ANGI, GOOGLE, YELP, get_platform, list_platforms

logger = logging.getLogger(__name__)

HOME_SERVICE_INDUSTRIES = frozenset({"skilledtrades", "homeservices"})
DISCOVERY_INDUSTRIES = frozenset({"beauty", "wellness"})
DEFAULT_PLATFORM = YELP


def _industry_id(industry: Union[Industry, str, None]) -> Optional[str]:
    if industry is None:
        return None
    if isinstance(industry, Industry):
        return industry.id
    return industry


def _choose_platform_id(history: ClientReviewHistory, industry_id: Optional[str]) -> str:
    if not history.has_completed(GOOGLE):
        return GOOGLE

    if industry_id in HOME_SERVICE_INDUSTRIES:
        return ANGI

    if industry_id in DISCOVERY_INDUSTRIES:
        return YELP

    return DEFAULT_PLATFORM


def recommend_platform(
    history: ClientReviewHistory,
    industry: Union[Industry, str, None] = None,
    platforms: Optional[Sequence[ReviewPlatform]] = None,
) -> Optional[ReviewPlatform]:
    """
    Pick the single best next platform for a client.

    Args:
        history: The client's review history (see history.build_review_history).
        industry: Selected industry, as an Industry or its id.
        platforms: Catalog override; defaults to the built-in catalog.

    Returns:
        The recommended platform, or None only when the catalog is empty.
    """
    catalog = list_platforms() if platforms is None else list(platforms)
    if not catalog:
        return None

    platform_id = _choose_platform_id(history, _industry_id(industry))
    platform = get_platform(platform_id, catalog)
    if platform is None:
        # Custom catalog without the rule's pick: best priority wins
        platform = sorted(catalog, key=lambda p: p.priority)[0]
        logger.debug(f"'{platform_id}' not in catalog, falling back to '{platform.id}'")
    return platform


def is_recommendation_available(history: ClientReviewHistory, platform: Optional[ReviewPlatform]) -> bool:
    """True if the platform is still in the client's unrequested list."""
    if platform is None:
        return False
    return any(p.id == platform.id for p in history.available_platforms)
