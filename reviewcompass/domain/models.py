"""
Domain Models - Clients, Review Platforms and Review Requests
==============================================================

Plain dataclasses shared by every layer. Wire payloads use camelCase
field names (clientId, sentAt, ...); `from_dict` / `to_dict` map them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RequestStatus(Enum):
    """Delivery status reported by the request tracking backend."""
    SENT = "sent"
    OPENED = "opened"
    COMPLETED = "completed"
    EXPIRED = "expired"


@dataclass(frozen=True)
class ReviewPlatform:
    """Catalog entry for a review site. Lower priority = asked first."""
    id: str
    name: str
    icon: str
    color: str
    description: str
    priority: int
    avg_impact: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "color": self.color,
            "description": self.description,
            "priority": self.priority,
            "avgImpact": self.avg_impact,
        }


@dataclass(frozen=True)
class Industry:
    """Business vertical the operator has selected."""
    id: str
    name: str


@dataclass
class Client:
    """A customer of the business."""
    id: int
    name: str
    email: str = ""
    phone: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Client":
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            email=data.get("email") or "",
            phone=data.get("phone") or "",
            created_at=data.get("createdAt") or "",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "createdAt": self.created_at,
        }


@dataclass
class ReviewRequest:
    """One outreach event asking a client for a review on one platform."""
    id: int
    client_id: int
    platform: str
    status: str = RequestStatus.SENT.value
    sent_at: str = ""
    request_url: str = ""
    client_name: str = ""
    client_email: str = ""
    custom_message: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == RequestStatus.COMPLETED.value

    @classmethod
    def from_dict(cls, data: dict) -> "ReviewRequest":
        return cls(
            id=int(data["id"]),
            client_id=int(data["clientId"]),
            platform=data["platform"],
            status=data.get("status") or RequestStatus.SENT.value,
            sent_at=data.get("sentAt") or "",
            request_url=data.get("requestUrl") or "",
            client_name=data.get("clientName") or "",
            client_email=data.get("clientEmail") or "",
            custom_message=data.get("customMessage"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "clientId": self.client_id,
            "clientName": self.client_name,
            "clientEmail": self.client_email,
            "platform": self.platform,
            "status": self.status,
            "sentAt": self.sent_at,
            "requestUrl": self.request_url,
            "customMessage": self.custom_message,
        }


@dataclass(frozen=True)
class ReviewRequestDraft:
    """A composed request, ready to hand to the tracking backend."""
    client_id: int
    client_name: str
    client_email: str
    platform: str
    custom_message: str

    def to_payload(self) -> dict:
        """Body for POST /review-requests."""
        return {
            "clientId": self.client_id,
            "clientName": self.client_name,
            "clientEmail": self.client_email,
            "platform": self.platform,
            "customMessage": self.custom_message,
        }


@dataclass
class ClientReviewHistory:
    """
    Derived view of one client's review requests.

    Recomputed from the latest clients/requests snapshot; never persisted.
    """
    client: Client
    requests: List[ReviewRequest] = field(default_factory=list)
    available_platforms: List[ReviewPlatform] = field(default_factory=list)

    @property
    def requested_platform_ids(self) -> List[str]:
        seen = []
        for req in self.requests:
            if req.platform not in seen:
                seen.append(req.platform)
        return seen

    @property
    def is_ready_for_outreach(self) -> bool:
        return len(self.available_platforms) > 0

    @property
    def suggested_platform(self) -> Optional[ReviewPlatform]:
        """Available platform with the best priority (catalog order breaks ties)."""
        if not self.available_platforms:
            return None
        # sorted() is stable, so equal priorities keep catalog order
        return sorted(self.available_platforms, key=lambda p: p.priority)[0]

    def has_completed(self, platform_id: str) -> bool:
        return any(r.platform == platform_id and r.is_completed for r in self.requests)
