"""
Platform Catalog - Supported Review Sites
==========================================

Static table, declared once. `list_platforms()` always returns the same
entries in declaration order.
"""

from typing import List, Optional, Sequence

from .models import ReviewPlatform

GOOGLE = "google"
YELP = "yelp"
FACEBOOK = "facebook"
ANGI = "angi"
BBB = "bbb"
NEXTDOOR = "nextdoor"

REVIEW_PLATFORMS = (
    ReviewPlatform(
        id=GOOGLE,
        name="Google Business",
        icon="🔍",
        color="bg-blue-100 text-blue-800",
        description="Highest local search impact",
        priority=1,
        avg_impact="Very High",
    ),
    ReviewPlatform(
        id=YELP,
        name="Yelp",
        icon="⭐",
        color="bg-red-100 text-red-800",
        description="Popular for service discovery",
        priority=2,
        avg_impact="High",
    ),
    ReviewPlatform(
        id=FACEBOOK,
        name="Facebook",
        icon="👥",
        color="bg-blue-100 text-blue-800",
        description="Social proof and referrals",
        priority=3,
        avg_impact="Medium",
    ),
    ReviewPlatform(
        id=ANGI,
        name="Angi (Angie's List)",
        icon="🏠",
        color="bg-green-100 text-green-800",
        description="Home services focused",
        priority=2,
        avg_impact="High",
    ),
    ReviewPlatform(
        id=BBB,
        name="Better Business Bureau",
        icon="🛡️",
        color="bg-purple-100 text-purple-800",
        description="Trust and credibility",
        priority=4,
        avg_impact="Medium",
    ),
    ReviewPlatform(
        id=NEXTDOOR,
        name="Nextdoor",
        icon="🏘️",
        color="bg-green-100 text-green-800",
        description="Neighborhood recommendations",
        priority=3,
        avg_impact="Medium",
    ),
)


def list_platforms() -> List[ReviewPlatform]:
    """Return the catalog in declaration order (a fresh list each call)."""
    return list(REVIEW_PLATFORMS)


def get_platform(platform_id: str, platforms: Optional[Sequence[ReviewPlatform]] = None) -> Optional[ReviewPlatform]:
    """Look up a platform by id."""
    catalog = REVIEW_PLATFORMS if platforms is None else platforms
    for platform in catalog:
        if platform.id == platform_id:
            return platform
    return None
