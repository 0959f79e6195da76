"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from datetime import date

import pytest

from food_suggest.adapters.memory_store import InMemoryKeyValueStore
from food_suggest.config import Settings
from food_suggest.containers import AppContainer
from food_suggest.domain.foods import Food
from food_suggest.domain.seed_catalog import SEED_FOODS
from food_suggest.services.ai import AIService, RecommendationClient
from food_suggest.services.cache import InMemoryCache
from food_suggest.services.catalog import CatalogSource, FoodCatalogService
from food_suggest.services.places import PlacesClient, PlacesService
from food_suggest.services.rate_limits import RateLimitService
from food_suggest.services.storage import KeyValueStore, StorageService
from food_suggest.services.suggestions import SuggestionService
from food_suggest.services.weather import WeatherClient, WeatherService


def make_food(  # noqa: PLR0913
    food_id: str,
    moods: tuple[str, ...] = ("happy",),
    regions: tuple[str, ...] = (),
    cuisine: str | None = None,
    is_vegetarian: bool = False,
    is_vegan: bool = False,
    is_gluten_free: bool = False,
    name: str | None = None,
) -> Food:
    """Build a catalog food with sensible defaults."""
    return Food(
        id=food_id,
        name=name or food_id.replace("_", " ").title(),
        description=f"{food_id} description",
        emoji="🍽️",
        category="Test",
        moods=moods,
        cuisine=cuisine,
        regions=regions,
        is_vegetarian=is_vegetarian,
        is_vegan=is_vegan,
        is_gluten_free=is_gluten_free,
    )


@dataclass
class FixedClock:
    """Callable returning a settable calendar date."""

    value: date = date(2024, 5, 1)

    def __call__(self) -> date:
        return self.value


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Key-value store whose every operation fails."""

    async def get(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    async def set(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")

    async def remove(self, key: str) -> None:
        raise OSError("storage unavailable")


@dataclass
class FakeCatalogSource(CatalogSource):
    """Catalog source returning a fixed payload or raising."""

    payload: dict[str, object] = field(default_factory=lambda: {"foods": []})
    error: Exception | None = None
    calls: list[str | None] = field(default_factory=list)

    async def fetch_foods(self, region: str | None = None) -> dict[str, object]:
        self.calls.append(region)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeRecommendationClient(RecommendationClient):
    """Recommendation client returning a fixed payload or raising."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "recommendation": "Warm comfort food today.",
            "explanation": "Soups and cheese dishes lift the mood.",
            "foods": ["Mercimek Çorbası", "Kuymak"],
            "tips": ["Add lemon", "Serve hot"],
        }
    )
    error: Exception | None = None
    requests: list[dict[str, object]] = field(default_factory=list)

    async def recommend(self, payload: dict[str, object]) -> dict[str, object]:
        self.requests.append(payload)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakePlacesClient(PlacesClient):
    """Places client returning fixed envelopes and recording requests."""

    payload: dict[str, object] = field(default_factory=lambda: {"places": []})
    error: Exception | None = None
    searches: list[dict[str, object]] = field(default_factory=list)
    nearby: list[dict[str, object]] = field(default_factory=list)

    async def search_places(self, payload: dict[str, object]) -> dict[str, object]:
        self.searches.append(payload)
        if self.error is not None:
            raise self.error
        return self.payload

    async def nearby_places(self, payload: dict[str, object]) -> dict[str, object]:
        self.nearby.append(payload)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeWeatherClient(WeatherClient):
    """Weather client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {"current": {"temperature_2m": 21.6, "weather_code": 0}}
    )
    error: Exception | None = None
    calls: int = 0

    async def current(self, latitude: float, longitude: float) -> dict[str, object]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


def offline_catalog(foods: tuple[Food, ...] | list[Food]) -> FoodCatalogService:
    """Catalog whose remote source is down, serving `foods` as the fallback."""
    return FoodCatalogService(
        source=FakeCatalogSource(error=ConnectionError("offline")),
        cache=InMemoryCache(),
        fallback_foods=tuple(foods),
    )


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def storage_service(store: InMemoryKeyValueStore) -> StorageService:
    return StorageService(store)


@pytest.fixture
def rate_limit_service(
    store: InMemoryKeyValueStore, clock: FixedClock
) -> RateLimitService:
    return RateLimitService(store, today=clock)


@pytest.fixture
def seed_catalog() -> FoodCatalogService:
    return offline_catalog(SEED_FOODS)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        food_api_base_url="https://proxy.test",
        ai_daily_limit=3,
        places_daily_limit=2,
        default_language="tr",
    )


@pytest.fixture
def recommendation_client() -> FakeRecommendationClient:
    return FakeRecommendationClient()


@pytest.fixture
def places_client() -> FakePlacesClient:
    return FakePlacesClient()


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryKeyValueStore,
    rate_limit_service: RateLimitService,
    seed_catalog: FoodCatalogService,
    recommendation_client: FakeRecommendationClient,
    places_client: FakePlacesClient,
) -> AppContainer:
    storage_service = StorageService(store)
    suggestion_service = SuggestionService(
        catalog=seed_catalog,
        storage=storage_service,
        rng=random.Random(7),
    )
    ai_service = AIService(
        client=recommendation_client,
        catalog=seed_catalog,
        rate_limits=rate_limit_service,
        daily_limit=settings.ai_daily_limit,
    )
    places_service = PlacesService(
        client=places_client,
        rate_limits=rate_limit_service,
        daily_limit=settings.places_daily_limit,
    )
    weather_service = WeatherService(client=FakeWeatherClient(), cache=InMemoryCache())

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        storage_service=storage_service,
        catalog_service=seed_catalog,
        suggestion_service=suggestion_service,
        rate_limit_service=rate_limit_service,
        ai_service=ai_service,
        places_service=places_service,
        weather_service=weather_service,
        close_resources=close_resources,
    )
