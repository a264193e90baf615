"""
Outreach Service - Review Request Use Cases
============================================

Orchestrates a ReviewRequestGateway and the domain rules. Holds no state
between calls: every operation refetches clients and requests, so the
latest snapshot always wins.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..domain.composer import compose_request, default_message
from ..domain.errors import ClientNotFoundError, DispatchError, IncompleteSelectionError
from ..domain.history import build_review_history, ready_for_outreach
from ..domain.models import (
    Client,
    ClientReviewHistory,
    Industry,
    ReviewPlatform,
    ReviewRequest,
)
from ..domain.platforms import get_platform, list_platforms
from ..domain.recommendation import is_recommendation_available, recommend_platform
from ..domain.stats import RequestStats, request_stats
from ..infrastructure.gateway import ReviewRequestGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Recommendation:
    """Recommended platform for one client, plus whether it is still unrequested."""
    client_id: int
    platform: Optional[ReviewPlatform]
    available: bool


class OutreachService:
    """
    USAGE:
        service = OutreachService(gateway, industry=get_industry("beauty"), business_name="Glow Studio")
        for history in service.ready_clients():
            print(history.client.name, service.recommend(history.client.id).platform.name)
        service.send_request(client_id=1, platform_id="yelp")
    """

    def __init__(
        self,
        gateway: ReviewRequestGateway,
        industry: Union[Industry, str, None] = None,
        business_name: Optional[str] = None,
        platforms: Optional[Sequence[ReviewPlatform]] = None,
    ):
        self._gateway = gateway
        self._industry = industry
        if not business_name and isinstance(industry, Industry):
            business_name = industry.name
        self._business_name = business_name
        self._platforms = list_platforms() if platforms is None else list(platforms)

    @property
    def platforms(self) -> List[ReviewPlatform]:
        return list(self._platforms)

    def snapshot(self) -> Tuple[List[Client], List[ReviewRequest]]:
        """Fetch fresh clients and review requests."""
        return self._gateway.list_clients(), self._gateway.list_review_requests()

    def histories(self) -> List[ClientReviewHistory]:
        clients, requests = self.snapshot()
        return build_review_history(clients, requests, self._platforms)

    def ready_clients(self) -> List[ClientReviewHistory]:
        clients, requests = self.snapshot()
        return ready_for_outreach(clients, requests, self._platforms)

    def client_history(self, client_id: int) -> ClientReviewHistory:
        for history in self.histories():
            if history.client.id == client_id:
                return history
        raise ClientNotFoundError(client_id)

    def recommend_for(self, history: ClientReviewHistory) -> Recommendation:
        platform = recommend_platform(history, self._industry, self._platforms)
        return Recommendation(
            client_id=history.client.id,
            platform=platform,
            available=is_recommendation_available(history, platform),
        )

    def recommend(self, client_id: int) -> Recommendation:
        return self.recommend_for(self.client_history(client_id))

    def preview_message(self, client_id: int, platform_id: str) -> str:
        """Default message the client would get if the operator doesn't override it."""
        history = self.client_history(client_id)
        platform = get_platform(platform_id, self._platforms)
        platform_name = platform.name if platform else platform_id
        return default_message(platform_name, history.client.name, self._business_name)

    def send_request(
        self,
        client_id: Optional[int],
        platform_id: Optional[str],
        override_message: Optional[str] = None,
    ) -> ReviewRequest:
        """
        Compose and dispatch one review request.

        Raises:
            IncompleteSelectionError: no client or platform chosen (nothing is sent).
            ClientNotFoundError: client id not in the current snapshot.
            DispatchError: the backend rejected or failed the create call.
        """
        missing = []
        if client_id is None:
            missing.append("client")
        if not platform_id:
            missing.append("platform")
        if missing:
            raise IncompleteSelectionError(missing)

        client = self._find_client(client_id)
        draft = compose_request(
            client,
            platform_id,
            override_message=override_message,
            business_name=self._business_name,
            platforms=self._platforms,
        )

        try:
            created = self._gateway.create_review_request(draft)
        except DispatchError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error dispatching review request for client {client_id}")
            raise DispatchError(str(e)) from e

        logger.info(f"Sent {draft.platform} review request to {client.name}")
        return created

    def stats(self) -> RequestStats:
        return request_stats(self._gateway.list_review_requests())

    def _find_client(self, client_id: int) -> Client:
        for client in self._gateway.list_clients():
            if client.id == client_id:
                return client
        raise ClientNotFoundError(client_id)

