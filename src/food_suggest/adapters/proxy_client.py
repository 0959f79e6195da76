"""HTTP client for the backend proxy that fronts catalog, AI and places APIs."""

from dataclasses import dataclass

import httpx

from food_suggest.services.ai import RecommendationClient
from food_suggest.services.catalog import CatalogSource
from food_suggest.services.places import PlacesClient


@dataclass
class HttpxProxyClient(CatalogSource, RecommendationClient, PlacesClient):
    """HTTPX-backed backend proxy client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(cls, base_url: str, timeout: float = 15) -> "HttpxProxyClient":
        """Create a proxy client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def fetch_foods(self, region: str | None = None) -> dict[str, object]:
        """Fetch the food catalog, optionally filtered by region."""
        params = {"region": region} if region else None
        response = await self.http_client.get(
            f"{self.base_url}/api/foods", params=params, timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    async def recommend(self, payload: dict[str, object]) -> dict[str, object]:
        """Request a generative recommendation."""
        return await self._post("/api/recommend", payload)

    async def search_places(self, payload: dict[str, object]) -> dict[str, object]:
        """Run a places text search."""
        return await self._post("/api/places/search", payload)

    async def nearby_places(self, payload: dict[str, object]) -> dict[str, object]:
        """Run a places nearby search."""
        return await self._post("/api/places/nearby", payload)

    async def health(self) -> bool:
        """Return True when the proxy answers its health check."""
        try:
            response = await self.http_client.get(
                f"{self.base_url}/health", timeout=self.timeout
            )
        except httpx.HTTPError:
            return False
        return response.is_success

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _post(self, path: str, payload: dict[str, object]) -> dict[str, object]:
        response = await self.http_client.post(
            f"{self.base_url}{path}", json=payload, timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()
