"""Recommendation output models."""

from dataclasses import dataclass

from food_suggest.domain.foods import Food


@dataclass(frozen=True)
class FoodSuggestion:
    """Transient engine output; recomputed on every request."""

    foods: list[Food]
    mood: str
    message: str
    is_regional: bool
    region_name: str | None = None


@dataclass(frozen=True)
class AIRecommendation:
    """Generative-model recommendation reconciled against the catalog."""

    recommendation: str
    explanation: str
    suggested_foods: list[Food]
    tips: list[str]


@dataclass(frozen=True)
class AIStatus:
    """Availability of AI recommendations for today."""

    configured: bool
    remaining_today: int
    daily_limit: int
