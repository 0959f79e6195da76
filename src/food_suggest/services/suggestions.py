"""Mood, region and diet aware food suggestions."""

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from food_suggest.domain.foods import Food
from food_suggest.domain.preferences import UserPreferences
from food_suggest.domain.regions import region_name
from food_suggest.domain.suggestions import FoodSuggestion
from food_suggest.services.catalog import FoodCatalogService
from food_suggest.services.classifier import (
    filter_by_diet,
    foods_for_cuisine,
    foods_for_mood,
    order_by_region,
    region_for_city,
)
from food_suggest.services.storage import StorageService

T = TypeVar("T")

MAX_REGIONAL_SLOTS = 2
RECENT_HISTORY_SIZE = 10

MOOD_MESSAGES: dict[str, tuple[str, ...]] = {
    "happy": (
        "Flavors to celebrate your happiness! 🎉",
        "Picks to make a good mood even better! 🌟",
        "Great food for a great day! ✨",
    ),
    "sad": (
        "Comfort food to wrap you up 🤗",
        "Flavors to lift your spirits 💝",
        "Suggestions to warm your heart 🌈",
    ),
    "energetic": (
        "Healthy options to keep your energy up! 💪",
        "Flavors that match your dynamic mood! ⚡",
        "Food to fuel your performance! 🏃",
    ),
    "tired": (
        "Suggestions to revive you ☕",
        "Dishes to recharge your batteries 🔋",
        "Flavors to shake off the fatigue 🌟",
    ),
    "stressed": (
        "Options to help you unwind 🧘",
        "Flavors to ease the stress 🌿",
        "Suggestions to rest your mind 🍃",
    ),
    "relaxed": (
        "Gourmet picks for a laid-back mood 🍷",
        "Special suggestions for peaceful moments 🌺",
        "Flavors to keep the calm going ☀️",
    ),
}

REGIONAL_MESSAGES: dict[str, str] = {
    "marmara": "The unique flavors of Marmara, just for you! 🌊",
    "ege": "The healthy Mediterranean cuisine of the Aegean 🫒",
    "akdeniz": "The spicy flavors of the Mediterranean coast 🌶️",
    "icanadolu": "Traditional tastes of Central Anatolia 🏔️",
    "karadeniz": "The rich cuisine of the Black Sea 🐟",
    "doguanadolu": "Authentic flavors of the East 🏔️",
    "guneydogu": "The legendary kitchen of the Southeast 🍖",
}


@dataclass
class SuggestionService:
    """Recommendation engine combining catalog, preferences and history."""

    catalog: FoodCatalogService
    storage: StorageService
    rng: random.Random = field(default_factory=random.Random)

    async def get_suggestions(
        self,
        mood_id: str,
        city: str | None = None,
        count: int = 4,
        cuisine: str | None = None,
    ) -> FoodSuggestion:
        """Suggest up to `count` foods, deprioritizing recently seen ones."""
        prefs = await self.storage.get_preferences()
        candidates = await self._candidates(mood_id, prefs, cuisine)
        history = (await self.storage.get_history())[:RECENT_HISTORY_SIZE]
        recent_ids = {item.food.id for item in history}

        rare = [food for food in candidates if food.id not in recent_ids]
        repeated = [food for food in candidates if food.id in recent_ids]
        return self._compose(mood_id, city, count, rare, repeated)

    async def get_new_suggestions(
        self,
        mood_id: str,
        exclude_ids: Sequence[str],
        city: str | None = None,
        count: int = 4,
        cuisine: str | None = None,
    ) -> FoodSuggestion:
        """Suggest foods not shown yet in this session.

        When excluding would leave fewer than `count` candidates, the exclusion
        is dropped for this call.
        """
        prefs = await self.storage.get_preferences()
        candidates = await self._candidates(mood_id, prefs, cuisine)
        excluded = set(exclude_ids)
        available = [food for food in candidates if food.id not in excluded]
        if len(available) < count:
            available = candidates
        return self._compose(mood_id, city, count, available, [])

    async def get_all_foods_for_mood(
        self, mood_id: str, city: str | None = None
    ) -> list[Food]:
        """Return every food for a mood, regional specialties first."""
        foods = await self.catalog.get_foods()
        return order_by_region(foods_for_mood(foods, mood_id), city)

    async def pick_featured_food(self) -> Food | None:
        """Pick one diet-compliant food to feature, e.g. in a daily reminder."""
        prefs = await self.storage.get_preferences()
        foods = filter_by_diet(await self.catalog.get_foods(), prefs.diet)
        if not foods:
            return None
        return self.rng.choice(foods)

    async def _candidates(
        self, mood_id: str, prefs: UserPreferences, cuisine: str | None
    ) -> list[Food]:
        """Mood filter, soft cuisine narrowing, then the hard diet filter."""
        foods = foods_for_mood(await self.catalog.get_foods(), mood_id)
        wanted_cuisine = cuisine or prefs.preferred_cuisine
        if wanted_cuisine:
            narrowed = foods_for_cuisine(foods, wanted_cuisine)
            if narrowed:
                foods = narrowed
        return filter_by_diet(foods, prefs.diet)

    def _compose(
        self,
        mood_id: str,
        city: str | None,
        count: int,
        fresh: list[Food],
        filler: list[Food],
    ) -> FoodSuggestion:
        """Select regional picks first, then fill from the rest and shuffle."""
        region = region_for_city(city)
        if region is None:
            regional: list[Food] = []
            others = fresh
        else:
            regional = [food for food in fresh if region in food.regions]
            others = [food for food in fresh if region not in food.regions]

        regional = self._shuffled(regional)
        pool = self._shuffled(others) + self._shuffled(filler)
        regional_count = min(MAX_REGIONAL_SLOTS, len(regional), max(count, 0))
        selection = regional[:regional_count] + pool[: max(count - regional_count, 0)]
        selection = self._shuffled(selection)

        is_regional = region is not None and any(
            region in food.regions for food in selection
        )
        return FoodSuggestion(
            foods=selection,
            mood=mood_id,
            message=self._message(mood_id, region if is_regional else None),
            is_regional=is_regional,
            region_name=region_name(region) if region else None,
        )

    def _message(self, mood_id: str, region: str | None) -> str:
        if region is not None and region in REGIONAL_MESSAGES:
            return REGIONAL_MESSAGES[region]
        messages = MOOD_MESSAGES.get(mood_id, MOOD_MESSAGES["happy"])
        return self.rng.choice(messages)

    def _shuffled(self, items: Sequence[T]) -> list[T]:
        """Return a uniformly shuffled copy."""
        copy = list(items)
        self.rng.shuffle(copy)
        return copy
