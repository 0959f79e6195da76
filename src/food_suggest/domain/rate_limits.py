"""Rate limit models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitCounter:
    """Persisted per-quota counter for one calendar day."""

    count: int = 0
    date_stamp: str = ""


@dataclass(frozen=True)
class RateLimitStatus:
    """Result of a quota check."""

    allowed: bool
    remaining: int
