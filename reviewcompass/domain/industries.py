"""Industry profiles the business can operate under."""

from typing import List, Optional

from .models import Industry

INDUSTRIES = (
    Industry(id="beauty", name="Beauty Professional"),
    Industry(id="wellness", name="Wellness Provider"),
    Industry(id="home_services", name="Skilled-Trades"),
    Industry(id="pet_care", name="Pet Care Professional"),
    Industry(id="creative", name="Creative Professional"),
    Industry(id="custom", name="Custom Business"),
)


def list_industries() -> List[Industry]:
    return list(INDUSTRIES)


def get_industry(industry_id: Optional[str]) -> Optional[Industry]:
    if not industry_id:
        return None
    for industry in INDUSTRIES:
        if industry.id == industry_id:
            return industry
    return None
