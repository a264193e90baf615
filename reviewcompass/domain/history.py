"""
Client Review History Index
============================

Joins clients with review requests to find, per client, which catalog
platforms have not been requested yet.

DESIGN:
- Pure functions of (clients, requests, catalog). Call them again on every
  fresh snapshot instead of keeping a live index.
- Any request on a platform (whatever its status) removes that platform from
  the client's available list. Re-sending is not blocked here, only no
  longer suggested.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from .models import Client, ClientReviewHistory, ReviewPlatform, ReviewRequest
from .platforms import list_platforms


def _catalog(platforms: Optional[Sequence[ReviewPlatform]]) -> List[ReviewPlatform]:
    return list_platforms() if platforms is None else list(platforms)


def _requests_by_client(requests: Sequence[ReviewRequest]) -> Dict[int, List[ReviewRequest]]:
    grouped: Dict[int, List[ReviewRequest]] = defaultdict(list)
    for req in requests:
        grouped[req.client_id].append(req)
    return grouped


def _filter_catalog(catalog: List[ReviewPlatform], client_requests: Sequence[ReviewRequest]) -> List[ReviewPlatform]:
    requested = {req.platform for req in client_requests}
    return [p for p in catalog if p.id not in requested]


def available_platforms(
    client: Client,
    requests: Sequence[ReviewRequest],
    platforms: Optional[Sequence[ReviewPlatform]] = None,
) -> List[ReviewPlatform]:
    """Catalog platforms never requested for this client, in catalog order."""
    client_requests = [r for r in requests if r.client_id == client.id]
    return _filter_catalog(_catalog(platforms), client_requests)


def build_review_history(
    clients: Sequence[Client],
    requests: Sequence[ReviewRequest],
    platforms: Optional[Sequence[ReviewPlatform]] = None,
) -> List[ClientReviewHistory]:
    """
    Build one ClientReviewHistory per client, in client order.

    Requests pointing at unknown clients are ignored.
    """
    catalog = _catalog(platforms)
    grouped = _requests_by_client(requests)

    histories = []
    for client in clients:
        client_requests = list(grouped.get(client.id, []))
        histories.append(
            ClientReviewHistory(
                client=client,
                requests=client_requests,
                available_platforms=_filter_catalog(catalog, client_requests),
            )
        )
    return histories


def ready_for_outreach(
    clients: Sequence[Client],
    requests: Sequence[ReviewRequest],
    platforms: Optional[Sequence[ReviewPlatform]] = None,
) -> List[ClientReviewHistory]:
    """Clients with at least one platform left to ask about."""
    return [h for h in build_review_history(clients, requests, platforms) if h.is_ready_for_outreach]
