"""Summary counts for the review request dashboard."""

from dataclasses import dataclass, asdict
from typing import Sequence

from .models import RequestStatus, ReviewRequest


@dataclass(frozen=True)
class RequestStats:
    total: int = 0
    sent: int = 0
    opened: int = 0
    completed: int = 0
    expired: int = 0
    completion_rate: int = 0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["completionRate"] = data.pop("completion_rate")
        return data


def request_stats(requests: Sequence[ReviewRequest]) -> RequestStats:
    """Count requests per status. completion_rate is a whole percentage."""
    counts = {status.value: 0 for status in RequestStatus}
    for req in requests:
        if req.status in counts:
            counts[req.status] += 1

    total = len(requests)
    completed = counts[RequestStatus.COMPLETED.value]
    # half up, not round()'s banker's rounding
    rate = int(completed * 100 / total + 0.5) if total > 0 else 0

    return RequestStats(
        total=total,
        sent=counts[RequestStatus.SENT.value],
        opened=counts[RequestStatus.OPENED.value],
        completed=completed,
        expired=counts[RequestStatus.EXPIRED.value],
        completion_rate=rate,
    )
