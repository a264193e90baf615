# Application Layer
# =================
# Use cases over a ReviewRequestGateway. No business rules live here.

from .outreach_service import OutreachService, Recommendation

__all__ = ["OutreachService", "Recommendation"]
