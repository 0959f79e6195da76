"""Generative-AI recommendations reconciled against the food catalog."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import BaseModel, Field, ValidationError, field_validator

from food_suggest.domain.foods import Food
from food_suggest.domain.moods import get_mood
from food_suggest.domain.preferences import DietaryPreferences
from food_suggest.domain.suggestions import AIRecommendation, AIStatus
from food_suggest.services.catalog import FoodCatalogService
from food_suggest.services.classifier import foods_for_mood, satisfies_diet
from food_suggest.services.rate_limits import Quota, RateLimitService

MAX_SUGGESTED_FOODS = 3
DEFAULT_RECOMMENDATION = "Your personalized picks are ready!"

_logger = logging.getLogger(__name__)


class RecommendationClient(Protocol):
    """Interface for a remote text-generation recommendation endpoint."""

    async def recommend(self, payload: dict[str, object]) -> dict[str, object]:
        """Return the raw model output for a recommendation request."""


class RecommendationPayload(BaseModel):
    """Model output expected from the recommendation endpoint."""

    recommendation: str | None = None
    explanation: str | None = None
    foods: list[Any] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    error: Any = None

    @field_validator("foods", "tips", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return [] if value is None else value


@dataclass
class AIService:
    """Service for quota-guarded AI recommendations."""

    client: RecommendationClient
    catalog: FoodCatalogService
    rate_limits: RateLimitService
    daily_limit: int = 20
    rng: random.Random = field(default_factory=random.Random)

    async def get_status(self) -> AIStatus:
        """Return today's remaining AI quota."""
        remaining = await self.rate_limits.get_remaining(Quota.AI, self.daily_limit)
        return AIStatus(
            configured=True,
            remaining_today=remaining,
            daily_limit=self.daily_limit,
        )

    async def get_personalized_recommendation(  # noqa: PLR0913
        self,
        mood_id: str,
        city: str | None = None,
        preferences: DietaryPreferences | None = None,
        language: str = "en",
        mood_label: str | None = None,
        mood_description: str | None = None,
    ) -> AIRecommendation | None:
        """Ask the model for dishes; None when over quota or on any failure.

        Label and description default to the mood's own metadata; callers pass
        localized text to steer the model's output language.
        """
        status = await self.rate_limits.check_and_increment(Quota.AI, self.daily_limit)
        if not status.allowed:
            _logger.info("AI recommendation skipped: daily limit reached")
            return None

        mood = get_mood(mood_id)
        if mood is None:
            _logger.warning("AI recommendation requested for unknown mood %s", mood_id)
            return None

        diet = preferences or DietaryPreferences()
        payload: dict[str, object] = {
            "mood": {
                "label": mood_label or mood.label,
                "description": mood_description or mood.description,
            },
            "city": city,
            "preferences": {
                "isVegetarian": diet.is_vegetarian,
                "isVegan": diet.is_vegan,
                "isGlutenFree": diet.is_gluten_free,
            },
            "language": language,
        }
        try:
            raw = await self.client.recommend(payload)
            parsed = RecommendationPayload.model_validate(raw)
        except ValidationError:
            _logger.warning("AI recommendation response was malformed")
            return None
        except Exception:
            _logger.warning("AI recommendation request failed", exc_info=True)
            return None
        if parsed.error:
            _logger.warning("AI recommendation returned an error: %s", parsed.error)
            return None

        catalog = await self.catalog.get_foods()
        names = [name for name in parsed.foods if isinstance(name, str) and name]
        return AIRecommendation(
            recommendation=parsed.recommendation or DEFAULT_RECOMMENDATION,
            explanation=parsed.explanation or "",
            suggested_foods=self._match_foods(names, catalog, mood_id, diet),
            tips=parsed.tips,
        )

    def _match_foods(
        self,
        names: list[str],
        catalog: list[Food],
        mood_id: str,
        diet: DietaryPreferences,
    ) -> list[Food]:
        """Map free-text dish names onto catalog foods, then backfill by mood."""
        matched: list[Food] = []
        for name in names:
            found = _find_by_name(name, catalog)
            if found is None or not satisfies_diet(found, diet):
                continue
            if all(existing.id != found.id for existing in matched):
                matched.append(found)

        if len(matched) < MAX_SUGGESTED_FOODS:
            matched_ids = {food.id for food in matched}
            pool = [
                food
                for food in foods_for_mood(catalog, mood_id)
                if satisfies_diet(food, diet) and food.id not in matched_ids
            ]
            self.rng.shuffle(pool)
            matched.extend(pool[: MAX_SUGGESTED_FOODS - len(matched)])
        return matched[:MAX_SUGGESTED_FOODS]


def _find_by_name(name: str, catalog: list[Food]) -> Food | None:
    """Return the first food whose name contains, or is contained in, `name`."""
    wanted = name.casefold()
    for food in catalog:
        for known in food.known_names():
            candidate = known.casefold()
            if candidate in wanted or wanted in candidate:
                return food
    return None
