"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query, Request, status

from food_suggest.api.models import (
    AIRecommendationRequest,
    HistoryEntryRequest,
    PlacesNearbyRequest,
    PlacesSearchRequest,
    PreferencesUpdate,
    RefreshSuggestionsRequest,
)
from food_suggest.app_logging import configure_logging
from food_suggest.config import parse_language
from food_suggest.containers import AppContainer
from food_suggest.domain.moods import MOODS
from food_suggest.services.rate_limits import Quota


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Food suggestion API starting (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/moods")
    async def list_moods() -> dict[str, object]:
        """Return the supported moods."""
        return {"moods": [asdict(mood) for mood in MOODS]}

    @app.get("/foods")
    async def list_foods(
        request: Request, region: str | None = None
    ) -> dict[str, object]:
        """Return the catalog, optionally one region's specialties."""
        foods = await _container(request).catalog_service.get_foods(region)
        return {"foods": [asdict(food) for food in foods]}

    @app.get("/foods/featured")
    async def featured_food(request: Request) -> dict[str, object]:
        """Return one food to feature in a reminder."""
        food = await _container(request).suggestion_service.pick_featured_food()
        return {"food": asdict(food) if food else None}

    @app.get("/suggestions")
    async def suggestions(
        request: Request,
        mood: str,
        city: str | None = None,
        count: int = Query(default=4, ge=1, le=20),
        cuisine: str | None = None,
    ) -> dict[str, object]:
        """Return suggestions for a mood."""
        suggestion = await _container(request).suggestion_service.get_suggestions(
            mood, city=city, count=count, cuisine=cuisine
        )
        return asdict(suggestion)

    @app.post("/suggestions/refresh")
    async def refresh_suggestions(
        body: RefreshSuggestionsRequest, request: Request
    ) -> dict[str, object]:
        """Return suggestions that avoid foods already shown this session."""
        suggestion = await _container(request).suggestion_service.get_new_suggestions(
            body.mood,
            body.exclude_ids,
            city=body.city,
            count=body.count,
            cuisine=body.cuisine,
        )
        return asdict(suggestion)

    @app.get("/preferences")
    async def get_preferences(request: Request) -> dict[str, object]:
        """Return the stored preferences."""
        prefs = await _container(request).storage_service.get_preferences()
        return asdict(prefs)

    @app.patch("/preferences")
    async def update_preferences(
        body: PreferencesUpdate, request: Request
    ) -> dict[str, object]:
        """Apply a partial preference update."""
        changes = {
            key: value
            for key, value in body.model_dump(exclude_unset=True).items()
            if value is not None or key == "preferred_cuisine"
        }
        try:
            prefs = await _container(request).storage_service.save_preferences(
                **changes
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return asdict(prefs)

    @app.post("/preferences/reset")
    async def reset_preferences(request: Request) -> dict[str, object]:
        """Restore default preferences."""
        prefs = await _container(request).storage_service.reset_preferences()
        return asdict(prefs)

    @app.get("/history")
    async def get_history(request: Request) -> dict[str, object]:
        """Return recently shown foods."""
        history = await _container(request).storage_service.get_history()
        return {"history": [asdict(item) for item in history]}

    @app.post("/history")
    async def add_history(
        body: HistoryEntryRequest, request: Request
    ) -> dict[str, object]:
        """Record a shown food."""
        state_container = _container(request)
        food = await state_container.catalog_service.get_food(body.food_id)
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        item = await state_container.storage_service.add_to_history(
            food, body.mood, city=body.city
        )
        return asdict(item)

    @app.delete("/history")
    async def clear_history(request: Request) -> dict[str, str]:
        """Delete all history."""
        await _container(request).storage_service.clear_history()
        return {"status": "ok"}

    @app.get("/favorites")
    async def get_favorites(request: Request) -> dict[str, object]:
        """Return favorite foods."""
        favorites = await _container(request).storage_service.get_favorites()
        return {"favorites": [asdict(food) for food in favorites]}

    @app.post("/favorites/{food_id}/toggle")
    async def toggle_favorite(food_id: str, request: Request) -> dict[str, object]:
        """Flip a food's favorite state."""
        state_container = _container(request)
        food = await state_container.catalog_service.get_food(food_id)
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        is_favorite = await state_container.storage_service.toggle_favorite(food)
        return {"food_id": food_id, "is_favorite": is_favorite}

    @app.get("/limits")
    async def limits(request: Request) -> dict[str, int]:
        """Return remaining daily quotas."""
        state_container = _container(request)
        settings = state_container.settings
        rate_limits = state_container.rate_limit_service
        return {
            "ai": await rate_limits.get_remaining(
                Quota.AI, settings.ai_daily_limit
            ),
            "places": await rate_limits.get_remaining(
                Quota.PLACES, settings.places_daily_limit
            ),
        }

    @app.get("/ai/status")
    async def ai_status(request: Request) -> dict[str, object]:
        """Return AI availability for today."""
        return asdict(await _container(request).ai_service.get_status())

    @app.post("/ai/recommendations")
    async def ai_recommendation(
        body: AIRecommendationRequest, request: Request
    ) -> dict[str, object]:
        """Return a generative recommendation, or null when unavailable."""
        state_container = _container(request)
        prefs = await state_container.storage_service.get_preferences()
        language = parse_language(
            prefs.language, state_container.settings.default_language
        )
        result = await state_container.ai_service.get_personalized_recommendation(
            body.mood,
            city=body.city,
            preferences=prefs.diet,
            language=language,
            mood_label=body.mood_label,
            mood_description=body.mood_description,
        )
        return {"result": asdict(result) if result else None}

    @app.post("/places/search")
    async def places_search(
        body: PlacesSearchRequest, request: Request
    ) -> dict[str, object]:
        """Find restaurants serving a food nearby."""
        places_service = _container(request).places_service
        places = await places_service.search_nearby_restaurants(
            body.query, body.latitude, body.longitude, radius=body.radius
        )
        return {
            "places": [asdict(place) for place in places],
            "remaining": await places_service.get_remaining(),
        }

    @app.post("/places/nearby")
    async def places_nearby(
        body: PlacesNearbyRequest, request: Request
    ) -> dict[str, object]:
        """Find restaurants nearby."""
        places_service = _container(request).places_service
        places = await places_service.search_nearby_by_type(
            body.latitude, body.longitude, radius=body.radius
        )
        return {
            "places": [asdict(place) for place in places],
            "remaining": await places_service.get_remaining(),
        }

    @app.get("/weather")
    async def weather(
        request: Request,
        latitude: float = Query(ge=-90, le=90),
        longitude: float = Query(ge=-180, le=180),
    ) -> dict[str, object]:
        """Return current weather near a coordinate."""
        data = await _container(request).weather_service.get_weather(
            latitude, longitude
        )
        return {"weather": asdict(data) if data else None}

    return app
