"""
Review Request Gateway - Abstraction Over the Tracking Backend
===============================================================

Provides a unified interface for reading clients/requests and creating
review requests. Delivery, retries and status tracking all happen behind
this interface.

USAGE:
    # Remote REST backend
    gateway = ReviewApiClient(base_url="http://127.0.0.1:8000/api")

    # Local SQLite store (used by the bundled web backend)
    gateway = DatabaseGateway(Database("reviewcompass.db"))

    gateway.create_review_request(draft)
"""

from abc import ABC, abstractmethod
from typing import List

from ..domain.models import Client, ReviewRequest, ReviewRequestDraft


class ReviewRequestGateway(ABC):
    """
    Abstract base class for review request backends.
    Implement this interface to add new storage/delivery backends.
    """

    @abstractmethod
    def list_clients(self) -> List[Client]:
        """Return all clients. Raises GatewayError on failure."""
        ...

    @abstractmethod
    def list_review_requests(self) -> List[ReviewRequest]:
        """Return every review request ever created. Raises GatewayError on failure."""
        ...

    @abstractmethod
    def create_review_request(self, draft: ReviewRequestDraft) -> ReviewRequest:
        """Persist and dispatch a draft. Raises DispatchError on failure."""
        ...
