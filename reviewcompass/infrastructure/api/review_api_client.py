"""
Review API Client - REST Gateway to the Review Request Backend
===============================================================

Talks to the backend that stores clients and review requests:
    GET  /clients
    GET  /review-requests
    POST /review-requests

ARCHITECTURAL DECISION:
- One requests.Session per client (connection reuse, shared auth header)
- No retries: a failed create is reported to the operator, who retries by hand
- Read failures raise GatewayError, create failures raise DispatchError
"""

import logging
from typing import List, Optional

import requests

from ...domain.errors import DispatchError, GatewayError
from ...domain.models import Client, ReviewRequest, ReviewRequestDraft
from ..config import get_settings
from ..gateway import ReviewRequestGateway

logger = logging.getLogger(__name__)


class ReviewApiClient(ReviewRequestGateway):
    """
    REST implementation of ReviewRequestGateway.

    USAGE:
        client = ReviewApiClient()
        clients = client.list_clients()
        created = client.create_review_request(draft)
    """

    CLIENTS_PATH = "/clients"
    REVIEW_REQUESTS_PATH = "/review-requests"

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self._base_url = (base_url or settings.api.base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.api.timeout_seconds
        self._session = session or requests.Session()

        token = token if token is not None else settings.api.token
        self._session.headers.update({"Accept": "application/json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _get_list(self, path: str) -> list:
        try:
            response = self._session.get(self._url(path), timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.Timeout as e:
            logger.warning(f"Timeout fetching {path}")
            raise GatewayError(f"Timed out fetching {path}") from e
        except requests.RequestException as e:
            logger.warning(f"Error fetching {path}: {e}")
            raise GatewayError(f"Could not fetch {path}: {e}") from e
        except ValueError as e:
            raise GatewayError(f"Invalid JSON from {path}") from e

        if not isinstance(data, list):
            raise GatewayError(f"Expected a list from {path}, got {type(data).__name__}")
        return data

    def list_clients(self) -> List[Client]:
        return [Client.from_dict(item) for item in self._get_list(self.CLIENTS_PATH)]

    def list_review_requests(self) -> List[ReviewRequest]:
        return [ReviewRequest.from_dict(item) for item in self._get_list(self.REVIEW_REQUESTS_PATH)]

    def create_review_request(self, draft: ReviewRequestDraft) -> ReviewRequest:
        """POST the draft. Any failure raises DispatchError; nothing is retried."""
        path = self.REVIEW_REQUESTS_PATH
        try:
            response = self._session.post(
                self._url(path),
                json=draft.to_payload(),
                timeout=self._timeout,
            )
            response.raise_for_status()
            created = ReviewRequest.from_dict(response.json())
        except requests.Timeout as e:
            logger.warning(f"Timeout creating {draft.platform} request for client {draft.client_id}")
            raise DispatchError("Review request timed out") from e
        except requests.RequestException as e:
            logger.warning(f"Failed to create {draft.platform} request for client {draft.client_id}: {e}")
            raise DispatchError(f"Review request failed: {e}") from e
        except (ValueError, KeyError) as e:
            raise DispatchError("Backend returned an invalid review request") from e

        logger.info(f"Review request {created.id} created: client {created.client_id} on {created.platform}")
        return created

    def close(self) -> None:
        self._session.close()
