"""ReviewRequestGateway backed by the local SQLite store."""

import logging
import secrets
import sqlite3
from typing import List

from ...domain.errors import DispatchError, GatewayError
from ...domain.models import Client, ReviewRequest, ReviewRequestDraft
from ..gateway import ReviewRequestGateway
from .database import Database

logger = logging.getLogger(__name__)


class DatabaseGateway(ReviewRequestGateway):
    """
    Stores review requests directly in SQLite.

    Each created request gets a review link of the form
    {link_base}/{platform}/{token}.
    """

    def __init__(self, db: Database, link_base: str = "https://reviews.example.com/r"):
        self._db = db
        self._link_base = link_base.rstrip("/")

    def _request_url(self, platform: str) -> str:
        return f"{self._link_base}/{platform}/{secrets.token_urlsafe(12)}"

    def list_clients(self) -> List[Client]:
        try:
            return self._db.get_all_clients()
        except sqlite3.Error as e:
            raise GatewayError(f"Could not load clients: {e}") from e

    def list_review_requests(self) -> List[ReviewRequest]:
        try:
            return self._db.get_all_review_requests()
        except sqlite3.Error as e:
            raise GatewayError(f"Could not load review requests: {e}") from e

    def create_review_request(self, draft: ReviewRequestDraft) -> ReviewRequest:
        try:
            if self._db.get_client(draft.client_id) is None:
                raise DispatchError(f"Unknown client: {draft.client_id}")
            return self._db.add_review_request(
                client_id=draft.client_id,
                platform=draft.platform,
                request_url=self._request_url(draft.platform),
                custom_message=draft.custom_message,
                client_name=draft.client_name,
                client_email=draft.client_email,
            )
        except sqlite3.Error as e:
            logger.exception(f"Failed to store review request for client {draft.client_id}")
            raise DispatchError(f"Could not store review request: {e}") from e
