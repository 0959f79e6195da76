"""Tests for region, mood and diet filters."""

from food_suggest.domain.preferences import DietaryPreferences
from food_suggest.domain.seed_catalog import SEED_FOODS
from food_suggest.services.classifier import (
    cuisines,
    filter_by_diet,
    foods_for_cuisine,
    foods_for_mood,
    order_by_region,
    region_for_city,
)
from tests.conftest import make_food


def test_region_for_city_is_exact_lookup() -> None:
    assert region_for_city("Trabzon") == "karadeniz"
    assert region_for_city("Gaziantep") == "guneydogu"
    assert region_for_city("trabzon") is None
    assert region_for_city("Berlin") is None
    assert region_for_city(None) is None


def test_filter_by_diet_vegan_keeps_only_vegan_items() -> None:
    vegan = [make_food(f"vegan_{i}", is_vegan=True) for i in range(3)]
    others = [make_food(f"meat_{i}") for i in range(5)]

    result = filter_by_diet(vegan + others, DietaryPreferences(is_vegan=True))

    assert len(result) == 3
    assert all(food.is_vegan for food in result)


def test_filter_by_diet_does_not_infer_vegetarian_from_vegan() -> None:
    food = make_food("odd_entry", is_vegan=True, is_vegetarian=False)

    assert filter_by_diet([food], DietaryPreferences(is_vegan=True)) == [food]
    assert filter_by_diet([food], DietaryPreferences(is_vegetarian=True)) == []


def test_filter_by_diet_combines_constraints() -> None:
    both = make_food("both", is_vegetarian=True, is_gluten_free=True)
    vegetarian_only = make_food("veg", is_vegetarian=True)
    gluten_free_only = make_food("gf", is_gluten_free=True)
    diet = DietaryPreferences(is_vegetarian=True, is_gluten_free=True)

    result = filter_by_diet([both, vegetarian_only, gluten_free_only], diet)

    assert result == [both]


def test_filter_by_diet_without_constraints_keeps_everything() -> None:
    assert len(filter_by_diet(SEED_FOODS, DietaryPreferences())) == len(SEED_FOODS)


def test_foods_for_mood_uses_mood_set() -> None:
    tired = foods_for_mood(SEED_FOODS, "tired")

    assert tired
    assert all("tired" in food.moods for food in tired)
    assert any(food.id == "kuymak" for food in tired)


def test_foods_for_cuisine_is_case_insensitive() -> None:
    foods = [
        make_food("pizza", cuisine="italian"),
        make_food("sushi", cuisine="Japanese"),
        make_food("mystery"),
    ]

    assert [food.id for food in foods_for_cuisine(foods, "Italian")] == ["pizza"]
    assert [food.id for food in foods_for_cuisine(foods, "japanese")] == ["sushi"]


def test_order_by_region_puts_specialties_first() -> None:
    foods = [
        make_food("burger"),
        make_food("hamsi", regions=("karadeniz",)),
        make_food("salad"),
    ]

    ordered = order_by_region(foods, "Rize")

    assert [food.id for food in ordered] == ["hamsi", "burger", "salad"]
    assert order_by_region(foods, "Unknown") == foods


def test_cuisines_are_distinct_in_order() -> None:
    foods = [
        make_food("a", cuisine="turkish"),
        make_food("b", cuisine="italian"),
        make_food("c", cuisine="turkish"),
        make_food("d"),
    ]

    assert cuisines(foods) == ["turkish", "italian"]
