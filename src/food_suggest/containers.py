"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_suggest.adapters.memory_store import InMemoryKeyValueStore
from food_suggest.adapters.open_meteo_client import HttpxOpenMeteoClient
from food_suggest.adapters.openai_recommendation_client import (
    OpenAIRecommendationClient,
)
from food_suggest.adapters.proxy_client import HttpxProxyClient
from food_suggest.adapters.supabase_kv_store import SupabaseKeyValueStore
from food_suggest.config import Settings
from food_suggest.services.ai import AIService, RecommendationClient
from food_suggest.services.cache import InMemoryCache
from food_suggest.services.catalog import FoodCatalogService
from food_suggest.services.places import PlacesService
from food_suggest.services.rate_limits import RateLimitService
from food_suggest.services.storage import KeyValueStore, StorageService
from food_suggest.services.suggestions import SuggestionService
from food_suggest.services.weather import WeatherService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage_service: StorageService
    catalog_service: FoodCatalogService
    suggestion_service: SuggestionService
    rate_limit_service: RateLimitService
    ai_service: AIService
    places_service: PlacesService
    weather_service: WeatherService
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Use Supabase when credentials are configured, else process memory."""
    if settings.supabase_url and settings.supabase_service_key:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return InMemoryKeyValueStore()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    proxy_client = HttpxProxyClient.create(
        resolved_settings.food_api_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    weather_client = HttpxOpenMeteoClient.create(resolved_settings.weather_base_url)

    recommendation_client: RecommendationClient = proxy_client
    if resolved_settings.ai_provider == "openai":
        if not resolved_settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when AI_PROVIDER=openai")
        recommendation_client = OpenAIRecommendationClient.create(
            api_key=resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
        )

    storage_service = StorageService(store)
    rate_limit_service = RateLimitService(store)
    catalog_service = FoodCatalogService(
        source=proxy_client,
        cache=InMemoryCache(),
        cache_ttl_seconds=resolved_settings.catalog_ttl_seconds,
        debug=resolved_settings.debug,
    )
    suggestion_service = SuggestionService(
        catalog=catalog_service,
        storage=storage_service,
    )
    ai_service = AIService(
        client=recommendation_client,
        catalog=catalog_service,
        rate_limits=rate_limit_service,
        daily_limit=resolved_settings.ai_daily_limit,
    )
    places_service = PlacesService(
        client=proxy_client,
        rate_limits=rate_limit_service,
        daily_limit=resolved_settings.places_daily_limit,
        language=resolved_settings.default_language,
    )
    weather_service = WeatherService(
        client=weather_client,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.weather_ttl_seconds,
    )

    async def close_resources() -> None:
        await proxy_client.close()
        await weather_client.close()

    return AppContainer(
        settings=resolved_settings,
        storage_service=storage_service,
        catalog_service=catalog_service,
        suggestion_service=suggestion_service,
        rate_limit_service=rate_limit_service,
        ai_service=ai_service,
        places_service=places_service,
        weather_service=weather_service,
        close_resources=close_resources,
    )
