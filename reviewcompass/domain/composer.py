"""
Request Composer - Outreach Message Builder
============================================

Builds the default review request text and the draft handed to the
tracking backend. An operator-supplied message always wins over the
default; a blank one does not count.
"""

from typing import Optional, Sequence, Union

from .errors import IncompleteSelectionError
from .models import Client, ReviewPlatform, ReviewRequestDraft
from .platforms import get_platform

DEFAULT_BUSINESS_NAME = "our business"

DEFAULT_MESSAGE_TEMPLATE = (
    "Hi {client_name}! Thank you for choosing {business_name} for your recent service. "
    "We'd be grateful if you could take a moment to share your experience on {platform_name}. "
    "Your feedback helps us serve you and other customers better. "
    "Click the link below to leave your review - it only takes a minute!"
)


def default_message(platform_name: str, client_name: str, business_name: Optional[str] = None) -> str:
    """Fill the default template. Pure and deterministic."""
    return DEFAULT_MESSAGE_TEMPLATE.format(
        client_name=client_name,
        business_name=business_name or DEFAULT_BUSINESS_NAME,
        platform_name=platform_name,
    )


def _platform_id(platform: Union[ReviewPlatform, str, None]) -> Optional[str]:
    if isinstance(platform, ReviewPlatform):
        return platform.id
    return platform or None


def compose_request(
    client: Optional[Client],
    platform: Union[ReviewPlatform, str, None],
    override_message: Optional[str] = None,
    business_name: Optional[str] = None,
    platforms: Optional[Sequence[ReviewPlatform]] = None,
) -> ReviewRequestDraft:
    """
    Build a ReviewRequestDraft for one client and platform.

    Raises:
        IncompleteSelectionError: client or platform not selected.
    """
    platform_id = _platform_id(platform)

    missing = []
    if client is None:
        missing.append("client")
    if not platform_id:
        missing.append("platform")
    if missing:
        raise IncompleteSelectionError(missing)

    if override_message and override_message.strip():
        message = override_message
    else:
        if isinstance(platform, ReviewPlatform):
            platform_name = platform.name
        else:
            known = get_platform(platform_id, platforms)
            platform_name = known.name if known else platform_id
        message = default_message(platform_name, client.name, business_name)

    return ReviewRequestDraft(
        client_id=client.id,
        client_name=client.name,
        client_email=client.email,
        platform=platform_id,
        custom_message=message,
    )
