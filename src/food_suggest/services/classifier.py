"""Pure region, mood and diet filters over the food catalog."""

from collections.abc import Iterable

from food_suggest.domain.foods import Food
from food_suggest.domain.preferences import DietaryPreferences
from food_suggest.domain.regions import REGION_MAP


def region_for_city(city: str | None) -> str | None:
    """Return the region code for an exact city name, if known."""
    if not city:
        return None
    return REGION_MAP.get(city)


def foods_for_mood(foods: Iterable[Food], mood_id: str) -> list[Food]:
    """Keep foods whose mood set contains the mood."""
    return [food for food in foods if mood_id in food.moods]


def foods_for_region(foods: Iterable[Food], region: str) -> list[Food]:
    """Keep foods tagged as a specialty of the region."""
    return [food for food in foods if region in food.regions]


def foods_for_cuisine(foods: Iterable[Food], cuisine: str) -> list[Food]:
    """Keep foods of a cuisine, compared case-insensitively."""
    wanted = cuisine.casefold()
    return [
        food for food in foods if food.cuisine and food.cuisine.casefold() == wanted
    ]


def filter_by_diet(foods: Iterable[Food], diet: DietaryPreferences) -> list[Food]:
    """Apply every active dietary constraint as a hard filter."""
    return [food for food in foods if satisfies_diet(food, diet)]


def satisfies_diet(food: Food, diet: DietaryPreferences) -> bool:
    """Return True when the food passes all active dietary constraints."""
    if diet.is_vegan and not food.is_vegan:
        return False
    if diet.is_vegetarian and not food.is_vegetarian:
        return False
    if diet.is_gluten_free and not food.is_gluten_free:
        return False
    return True


def order_by_region(foods: Iterable[Food], city: str | None) -> list[Food]:
    """Return foods with the city's regional specialties first."""
    items = list(foods)
    region = region_for_city(city)
    if region is None:
        return items
    regional = [food for food in items if region in food.regions]
    others = [food for food in items if region not in food.regions]
    return regional + others


def cuisines(foods: Iterable[Food]) -> list[str]:
    """Return distinct cuisines in first-seen order."""
    seen: dict[str, None] = {}
    for food in foods:
        if food.cuisine:
            seen.setdefault(food.cuisine, None)
    return list(seen)
