"""Exception hierarchy for review outreach."""


class ReviewCompassError(Exception):
    """Base exception for review outreach errors."""
    pass


class IncompleteSelectionError(ReviewCompassError):
    """Raised when a request is composed without a client or a platform."""

    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(f"Incomplete selection: choose a {' and a '.join(self.missing)}")


class ClientNotFoundError(ReviewCompassError):
    """Raised when a client id is not in the current snapshot."""

    def __init__(self, client_id):
        self.client_id = client_id
        super().__init__(f"Client not found: {client_id}")


class InvalidStatusTransition(ReviewCompassError):
    """Raised when the tracking backend is asked for an illegal status change."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move review request from '{current}' to '{requested}'")


class GatewayError(ReviewCompassError):
    """The request tracking backend could not be reached or rejected a call."""
    pass


class DispatchError(GatewayError):
    """Creating a review request failed. Not retried automatically."""
    pass
