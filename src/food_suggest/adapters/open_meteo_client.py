"""Open-Meteo forecast API client."""

from dataclasses import dataclass

import httpx

from food_suggest.services.weather import WeatherClient

_CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,is_day,precipitation,rain,showers,"
    "snowfall,weather_code,cloud_cover,wind_speed_10m"
)


@dataclass
class HttpxOpenMeteoClient(WeatherClient):
    """HTTPX-backed Open-Meteo client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxOpenMeteoClient":
        """Create a weather client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def current(self, latitude: float, longitude: float) -> dict[str, object]:
        """Fetch current conditions for a coordinate."""
        response = await self.http_client.get(
            f"{self.base_url}/v1/forecast",
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": _CURRENT_FIELDS,
                "timezone": "auto",
                "forecast_days": 1,
            },
            timeout=10,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
