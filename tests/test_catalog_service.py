"""Tests for the food catalog service."""

import asyncio

from food_suggest.services.cache import InMemoryCache
from food_suggest.services.catalog import FoodCatalogService
from tests.conftest import FakeCatalogSource, make_food

REMOTE_PAYLOAD = {
    "foods": [
        {
            "id": "menemen",
            "name_tr": "Menemen",
            "nameEn": "Turkish Scrambled Eggs",
            "description": "Eggs with peppers",
            "emoji": "🍳",
            "category": "Kahvaltı",
            "cuisine": "turkish",
            "moods": '["happy", "tired"]',
            "regions": None,
            "isVegetarian": 1,
            "is_vegan": 0,
            "is_gluten_free": True,
        },
        {
            "id": "hamsi",
            "name": "Hamsi Tava",
            "moods": ["sad"],
            "regions": ["karadeniz"],
        },
    ]
}


def _service(source: FakeCatalogSource, **kwargs: object) -> FoodCatalogService:
    fallback = (make_food("bundled"), make_food("local", regions=("ege",)))
    return FoodCatalogService(
        source=source, cache=InMemoryCache(), fallback_foods=fallback, **kwargs
    )


def test_remote_rows_are_normalized() -> None:
    service = _service(FakeCatalogSource(payload=REMOTE_PAYLOAD))

    foods = asyncio.run(service.get_foods())

    menemen, hamsi = foods
    assert menemen.name == "Menemen"
    assert menemen.name_en == "Turkish Scrambled Eggs"
    assert menemen.moods == ("happy", "tired")
    assert menemen.regions == ()
    assert menemen.is_vegetarian is True
    assert menemen.is_vegan is False
    assert menemen.is_gluten_free is True
    assert menemen.localized_name("en") == "Turkish Scrambled Eggs"
    assert menemen.localized_description("tr") == "Eggs with peppers"
    assert hamsi.emoji == "🍽️"
    assert hamsi.regions == ("karadeniz",)
    assert hamsi.description == ""


def test_unfiltered_catalog_is_cached() -> None:
    source = FakeCatalogSource(payload=REMOTE_PAYLOAD)
    service = _service(source)

    asyncio.run(service.get_foods())
    asyncio.run(service.get_foods())

    assert source.calls == [None]


def test_region_requests_bypass_cache() -> None:
    source = FakeCatalogSource(payload=REMOTE_PAYLOAD)
    service = _service(source)

    asyncio.run(service.get_foods("karadeniz"))
    asyncio.run(service.get_foods("karadeniz"))
    asyncio.run(service.get_foods())

    assert source.calls == ["karadeniz", "karadeniz", None]


def test_invalidate_forces_refetch() -> None:
    source = FakeCatalogSource(payload=REMOTE_PAYLOAD)
    service = _service(source)
    asyncio.run(service.get_foods())

    service.invalidate()
    asyncio.run(service.get_foods())

    assert source.calls == [None, None]


def test_expired_cache_refetches() -> None:
    source = FakeCatalogSource(payload=REMOTE_PAYLOAD)
    service = _service(source, cache_ttl_seconds=0)

    asyncio.run(service.get_foods())
    asyncio.run(service.get_foods())

    assert source.calls == [None, None]


def test_network_failure_uses_fallback() -> None:
    service = _service(FakeCatalogSource(error=ConnectionError("down")))

    foods = asyncio.run(service.get_foods())

    assert [food.id for food in foods] == ["bundled", "local"]


def test_region_fallback_is_filtered() -> None:
    service = _service(FakeCatalogSource(error=ConnectionError("down")))

    foods = asyncio.run(service.get_foods("ege"))

    assert [food.id for food in foods] == ["local"]


def test_fallback_is_not_cached() -> None:
    source = FakeCatalogSource(error=ConnectionError("down"))
    service = _service(source)
    asyncio.run(service.get_foods())

    source.error = None
    source.payload = REMOTE_PAYLOAD
    foods = asyncio.run(service.get_foods())

    assert [food.id for food in foods] == ["menemen", "hamsi"]


def test_malformed_payload_uses_fallback() -> None:
    service = _service(FakeCatalogSource(payload={"items": []}))

    foods = asyncio.run(service.get_foods())

    assert [food.id for food in foods] == ["bundled", "local"]


def test_empty_remote_catalog_is_returned_as_is() -> None:
    service = _service(FakeCatalogSource(payload={"foods": []}))

    assert asyncio.run(service.get_foods()) == []


def test_get_food_by_id() -> None:
    service = _service(FakeCatalogSource(payload=REMOTE_PAYLOAD))

    food = asyncio.run(service.get_food("hamsi"))

    assert food is not None
    assert food.name == "Hamsi Tava"
    assert asyncio.run(service.get_food("missing")) is None


def test_mutating_returned_catalog_leaves_cache_intact() -> None:
    source = FakeCatalogSource(payload=REMOTE_PAYLOAD)
    service = _service(source)

    first = asyncio.run(service.get_foods())
    first.clear()

    assert [food.id for food in asyncio.run(service.get_foods())] == [
        "menemen",
        "hamsi",
    ]
    assert source.calls == [None]
