"""Current weather lookup with a short-lived cache."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_suggest.domain.weather import WeatherData
from food_suggest.services.cache import Cache

_logger = logging.getLogger(__name__)


class WeatherClient(Protocol):
    """Interface for a forecast provider."""

    async def current(self, latitude: float, longitude: float) -> dict[str, object]:
        """Return the raw current-conditions payload."""


@dataclass
class WeatherService:
    """Service returning current conditions, or None when unavailable."""

    client: WeatherClient
    cache: Cache
    ttl_seconds: int = 900

    async def get_weather(
        self, latitude: float, longitude: float
    ) -> WeatherData | None:
        """Return current weather near a coordinate."""
        cache_key = f"weather:{latitude:.2f}:{longitude:.2f}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, WeatherData):
            return cached

        try:
            payload = await self.client.current(latitude, longitude)
        except Exception as exc:
            _logger.warning("Weather lookup failed: %s", exc)
            return None

        current = payload.get("current")
        if not isinstance(current, dict):
            return None
        temperature = current.get("temperature_2m")
        code = current.get("weather_code")
        if not isinstance(temperature, int | float) or not isinstance(code, int):
            return None

        condition, icon = map_weather_code(code, float(temperature))
        weather = WeatherData(
            temperature=round(temperature),
            condition=condition,
            description=f"weather_{condition}",
            icon=icon,
        )
        self.cache.set(cache_key, weather, ttl_seconds=self.ttl_seconds)
        return weather


def map_weather_code(code: int, temperature: float) -> tuple[str, str]:
    """Map a WMO weather code to a condition and icon name."""
    if code >= 95:
        return "stormy", "thunderstorm"
    if code >= 71:
        return "snowy", "snow"
    if code >= 51:
        return "rainy", "rainy"
    if code >= 45:
        return "foggy", "cloud"
    if code >= 1:
        return "cloudy", "cloudy"
    if temperature >= 28:
        return "hot", "sunny"
    if temperature <= 10:
        return "cold", "thermometer"
    return "clear", "sunny"
