"""Quota-guarded nearby restaurant search."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from pydantic import TypeAdapter

from food_suggest.domain.places import NearbyRestaurant, PlacePayload, Review
from food_suggest.services.rate_limits import Quota, RateLimitService

EARTH_RADIUS_KM = 6371.0
MAX_REVIEWS = 2

PRICE_LEVELS: dict[str, str] = {
    "PRICE_LEVEL_FREE": "",
    "PRICE_LEVEL_INEXPENSIVE": "₺",
    "PRICE_LEVEL_MODERATE": "₺₺",
    "PRICE_LEVEL_EXPENSIVE": "₺₺₺",
    "PRICE_LEVEL_VERY_EXPENSIVE": "₺₺₺₺",
}

_logger = logging.getLogger(__name__)

_places_adapter = TypeAdapter(list[PlacePayload])


class PlacesClient(Protocol):
    """Interface for the places search endpoints of the backend proxy."""

    async def search_places(self, payload: dict[str, object]) -> dict[str, object]:
        """Run a text search biased to a coordinate circle."""

    async def nearby_places(self, payload: dict[str, object]) -> dict[str, object]:
        """Run a restaurant-type search restricted to a coordinate circle."""


@dataclass
class PlacesService:
    """Service for restaurant lookups.

    Failures and empty results both come back as an empty list.
    """

    client: PlacesClient
    rate_limits: RateLimitService
    daily_limit: int = 20
    language: str = "en"

    async def search_nearby_restaurants(
        self,
        food_query: str,
        latitude: float,
        longitude: float,
        radius: int = 2000,
    ) -> list[NearbyRestaurant]:
        """Find restaurants serving a food near the user."""
        if not await self._consume_quota():
            return []
        payload: dict[str, object] = {
            "query": f"{food_query} restaurant",
            "latitude": latitude,
            "longitude": longitude,
            "radius": radius,
            "language": self.language,
        }
        try:
            data = await self.client.search_places(payload)
            return _map_places(data, latitude, longitude)
        except Exception:
            _logger.warning(
                "Restaurant search for %s failed", food_query, exc_info=True
            )
            return []

    async def search_nearby_by_type(
        self, latitude: float, longitude: float, radius: int = 1500
    ) -> list[NearbyRestaurant]:
        """Find any restaurants near the user."""
        if not await self._consume_quota():
            return []
        payload: dict[str, object] = {
            "latitude": latitude,
            "longitude": longitude,
            "radius": radius,
            "language": self.language,
        }
        try:
            data = await self.client.nearby_places(payload)
            return _map_places(data, latitude, longitude)
        except Exception:
            _logger.warning("Nearby restaurant search failed", exc_info=True)
            return []

    async def get_remaining(self) -> int:
        """Return today's remaining places quota."""
        return await self.rate_limits.get_remaining(Quota.PLACES, self.daily_limit)

    async def _consume_quota(self) -> bool:
        status = await self.rate_limits.check_and_increment(
            Quota.PLACES, self.daily_limit
        )
        if not status.allowed:
            _logger.info("Places search skipped: daily limit reached")
        return status.allowed


def _map_places(
    data: dict[str, object], latitude: float, longitude: float
) -> list[NearbyRestaurant]:
    """Translate the proxy's `places` envelope into display records."""
    if data.get("error"):
        raise ValueError(f"Places search returned an error: {data['error']}")
    places = _places_adapter.validate_python(data.get("places") or [])
    return [_to_restaurant(place, latitude, longitude) for place in places]


def _to_restaurant(
    place: PlacePayload, latitude: float, longitude: float
) -> NearbyRestaurant:
    distance = None
    location = place.location
    if location and location.latitude is not None and location.longitude is not None:
        distance = format_distance(
            haversine_km(latitude, longitude, location.latitude, location.longitude)
        )
    reviews = [
        Review(
            author_name=(review.author.display_name if review.author else None)
            or "Anonymous",
            relative_time=review.relative_publish_time,
            rating=review.rating,
            text=review.text.text if review.text else "",
            author_photo_url=review.author.photo_uri if review.author else None,
        )
        for review in place.reviews[:MAX_REVIEWS]
    ]
    opening_hours = place.current_opening_hours
    return NearbyRestaurant(
        id=place.id,
        name=place.display_name.text if place.display_name else "",
        address=place.formatted_address,
        rating=place.rating,
        user_ratings_total=place.user_rating_count,
        price_level=map_price_level(place.price_level),
        is_open=opening_hours.open_now if opening_hours else None,
        photo_url=place.photo_url,
        types=place.types,
        distance=distance,
        reviews=reviews,
    )


def map_price_level(level: str | None) -> str:
    """Map a provider price tier to currency symbols."""
    if not level:
        return ""
    return PRICE_LEVELS.get(level, "")


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_distance(distance_km: float) -> str:
    """Format meters below 1 km, otherwise kilometers with one decimal."""
    if distance_km < 1:
        return f"{round(distance_km * 1000)} m"
    return f"{distance_km:.1f} km"
