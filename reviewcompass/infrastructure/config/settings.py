"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclasses, one group per concern
- The selected industry lives here and is passed explicitly into the
  recommendation rule and composer, never read from a global inside them
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from ...domain.industries import get_industry
from ...domain.models import Industry
from ...domain.recommendation import DISCOVERY_INDUSTRIES, HOME_SERVICE_INDUSTRIES

# Load .env file if present (development convenience)
load_dotenv()


def _parse_float(raw: str) -> Optional[float]:
    try:
        return float(raw)
    except ValueError:
        return None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    value = _parse_float(raw)
    return default if value is None else value


@dataclass(frozen=True)
class ApiSettings:
    """REST backend that stores clients and review requests."""

    base_url: str = field(
        default_factory=lambda: os.getenv("REVIEW_API_URL", "http://127.0.0.1:8000/api")
    )
    token: str = field(default_factory=lambda: os.getenv("REVIEW_API_TOKEN", ""))
    timeout_seconds: float = field(default_factory=lambda: _env_float("REVIEW_API_TIMEOUT", 10.0))
    # Kept as given so validate() can report a value that did not parse
    timeout_raw: str = field(default_factory=lambda: os.getenv("REVIEW_API_TIMEOUT", ""))


@dataclass(frozen=True)
class BusinessSettings:
    """Who is asking for the review."""

    name: str = field(default_factory=lambda: os.getenv("BUSINESS_NAME", ""))
    industry_id: str = field(default_factory=lambda: os.getenv("BUSINESS_INDUSTRY", ""))

    @property
    def industry(self) -> Optional[Industry]:
        return get_industry(self.industry_id)

    @property
    def rule_industry(self) -> Union[Industry, str, None]:
        """
        What the recommendation rule gets: the catalog profile when the id is
        in the industry table, otherwise the raw id (e.g. "skilledtrades").
        """
        return self.industry or self.industry_id.strip().lower() or None

    @property
    def display_name(self) -> Optional[str]:
        """Name used in outreach messages: business name, else industry name."""
        if self.name:
            return self.name
        industry = self.industry
        return industry.name if industry else None


@dataclass(frozen=True)
class ReviewSettings:
    """Review link settings."""

    link_base: str = field(
        default_factory=lambda: os.getenv("REVIEW_LINK_BASE", "https://reviews.example.com/r")
    )


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from reviewcompass.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.api.base_url)
    """

    api: ApiSettings = field(default_factory=ApiSettings)
    business: BusinessSettings = field(default_factory=BusinessSettings)
    review: ReviewSettings = field(default_factory=ReviewSettings)

    database_file: Path = field(
        default_factory=lambda: Path(os.getenv("DATABASE_FILE", "reviewcompass.db"))
    )

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        rule_ids = HOME_SERVICE_INDUSTRIES | DISCOVERY_INDUSTRIES
        industry_id = self.business.industry_id.strip().lower()
        if industry_id and self.business.industry is None and industry_id not in rule_ids:
            issues.append(
                f"WARNING: BUSINESS_INDUSTRY '{self.business.industry_id}' is not a known industry. "
                "Recommendations will use the default platform."
            )

        if self.api.timeout_raw and _parse_float(self.api.timeout_raw) is None:
            issues.append(
                f"WARNING: REVIEW_API_TIMEOUT '{self.api.timeout_raw}' is not a number. "
                f"Using {self.api.timeout_seconds} seconds."
            )

        if not self.business.name:
            issues.append(
                "WARNING: BUSINESS_NAME not set. "
                "Messages will use the industry name or 'our business'."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
