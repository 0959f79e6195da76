"""Food catalog with a remote source, in-memory cache and bundled fallback."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import TypeAdapter

from food_suggest.domain.foods import Food, RemoteFood
from food_suggest.domain.seed_catalog import SEED_FOODS
from food_suggest.services.cache import Cache
from food_suggest.services.classifier import foods_for_region

_CACHE_KEY = "catalog:foods"

_logger = logging.getLogger(__name__)

_remote_foods_adapter = TypeAdapter(list[RemoteFood])


class CatalogSource(Protocol):
    """Interface for the remote food catalog endpoint."""

    async def fetch_foods(self, region: str | None = None) -> dict[str, object]:
        """Return the raw `{foods: [...]}` payload, optionally region-filtered."""


@dataclass
class FoodCatalogService:
    """Service returning the master food list.

    Only the unfiltered catalog is cached. Region-filtered requests always go
    to the network. A failed fetch falls back to the bundled catalog for that
    call, with no retry.
    """

    source: CatalogSource
    cache: Cache
    fallback_foods: tuple[Food, ...] = SEED_FOODS
    cache_ttl_seconds: int | None = None
    debug: bool = False

    async def get_foods(self, region: str | None = None) -> list[Food]:
        """Return catalog foods, optionally only one region's specialties."""
        if region is None:
            cached = self.cache.get(_CACHE_KEY)
            if isinstance(cached, list):
                return list(cached)

        try:
            payload = await self.source.fetch_foods(region)
            foods = _parse_foods(payload)
        except Exception as exc:
            _logger.warning(
                "Remote catalog unavailable (region=%s), using bundled foods: %s",
                region,
                exc,
            )
            return self._fallback(region)

        if region is None:
            self.cache.set(_CACHE_KEY, list(foods), ttl_seconds=self.cache_ttl_seconds)
        if self.debug:
            _logger.info("Catalog fetched: region=%s foods=%s", region, len(foods))
        return foods

    async def get_food(self, food_id: str) -> Food | None:
        """Return a catalog food by id."""
        for food in await self.get_foods():
            if food.id == food_id:
                return food
        return None

    def invalidate(self) -> None:
        """Drop the cached catalog so the next call refetches it."""
        self.cache.delete(_CACHE_KEY)

    def _fallback(self, region: str | None) -> list[Food]:
        if region is None:
            return list(self.fallback_foods)
        return foods_for_region(self.fallback_foods, region)


def _parse_foods(payload: dict[str, object]) -> list[Food]:
    """Translate the remote envelope into catalog foods."""
    if not isinstance(payload, dict) or "foods" not in payload:
        raise ValueError("Catalog response has no foods list")
    rows = _remote_foods_adapter.validate_python(payload["foods"])
    return [row.to_food() for row in rows]
