"""Preference, history and favorites persistence."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from food_suggest.domain.foods import Food
from food_suggest.domain.preferences import (
    HistoryItem,
    UserPreferences,
    apply_preference_changes,
)

PREFERENCES_KEY = "@suggest_food_preferences"
HISTORY_KEY = "@suggest_food_history"
FAVORITES_KEY = "@suggest_food_favorites"

_logger = logging.getLogger(__name__)

_preferences_adapter = TypeAdapter(UserPreferences)
_history_adapter = TypeAdapter(list[HistoryItem])
_favorites_adapter = TypeAdapter(list[Food])


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class KeyValueStore(Protocol):
    """Async string key-value persistence."""

    async def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    async def set(self, key: str, value: str) -> None:
        """Store a value under a key."""

    async def remove(self, key: str) -> None:
        """Delete a key if present."""


@dataclass
class StorageService:
    """Service for locally persisted user state."""

    store: KeyValueStore
    history_limit: int = 50
    clock: Callable[[], datetime] = _utcnow

    async def get_preferences(self) -> UserPreferences:
        """Return stored preferences merged over defaults."""
        raw = await self._read(PREFERENCES_KEY)
        if raw is None:
            return UserPreferences()
        try:
            stored = TypeAdapter(dict[str, Any]).validate_json(raw)
        except ValidationError:
            _logger.warning("Stored preferences are malformed; using defaults")
            return UserPreferences()
        defaults = _preferences_adapter.dump_python(UserPreferences())
        known = {key: value for key, value in stored.items() if key in defaults}
        try:
            return _preferences_adapter.validate_python({**defaults, **known})
        except ValidationError:
            _logger.warning("Stored preferences have invalid values; using defaults")
            return UserPreferences()

    async def save_preferences(self, **changes: object) -> UserPreferences:
        """Apply preference changes and persist the result."""
        current = await self.get_preferences()
        updated = apply_preference_changes(current, changes)
        await self.store.set(
            PREFERENCES_KEY, _preferences_adapter.dump_json(updated).decode()
        )
        return updated

    async def reset_preferences(self) -> UserPreferences:
        """Restore default preferences."""
        defaults = UserPreferences()
        await self.store.set(
            PREFERENCES_KEY, _preferences_adapter.dump_json(defaults).decode()
        )
        return defaults

    async def get_history(self) -> list[HistoryItem]:
        """Return history entries, newest first."""
        return _parse_history(await self._read(HISTORY_KEY))

    async def add_to_history(
        self, food: Food, mood: str, city: str | None = None
    ) -> HistoryItem:
        """Prepend a history entry, keeping only the most recent ones."""
        now = self.clock()
        item = HistoryItem(
            id=f"{food.id}_{int(now.timestamp() * 1000)}",
            food=food,
            mood=mood,
            timestamp=now,
            city=city,
        )
        stored = _parse_history(await self.store.get(HISTORY_KEY))
        history = [item, *stored][: self.history_limit]
        await self.store.set(HISTORY_KEY, _history_adapter.dump_json(history).decode())
        return item

    async def clear_history(self) -> None:
        """Delete all history entries."""
        await self.store.remove(HISTORY_KEY)

    async def get_favorites(self) -> list[Food]:
        """Return favorite foods, newest first."""
        return _parse_favorites(await self._read(FAVORITES_KEY))

    async def add_favorite(self, food: Food) -> None:
        """Add a food to favorites unless already present."""
        favorites = _parse_favorites(await self.store.get(FAVORITES_KEY))
        if any(existing.id == food.id for existing in favorites):
            return
        await self._write_favorites([food, *favorites])

    async def remove_favorite(self, food_id: str) -> None:
        """Remove a food from favorites."""
        favorites = _parse_favorites(await self.store.get(FAVORITES_KEY))
        await self._write_favorites([food for food in favorites if food.id != food_id])

    async def is_favorite(self, food_id: str) -> bool:
        """Return True when the food is a favorite."""
        return any(food.id == food_id for food in await self.get_favorites())

    async def toggle_favorite(self, food: Food) -> bool:
        """Flip the favorite state and return the new state."""
        if await self.is_favorite(food.id):
            await self.remove_favorite(food.id)
            return False
        await self.add_favorite(food)
        return True

    async def _write_favorites(self, favorites: list[Food]) -> None:
        await self.store.set(
            FAVORITES_KEY, _favorites_adapter.dump_json(favorites).decode()
        )

    async def _read(self, key: str) -> str | None:
        """Read a key, treating storage failures as missing data."""
        try:
            return await self.store.get(key)
        except Exception:
            _logger.exception("Failed to read %s from storage", key)
            return None


def _parse_history(raw: str | None) -> list[HistoryItem]:
    if raw is None:
        return []
    try:
        return _history_adapter.validate_json(raw)
    except ValidationError:
        _logger.warning("Stored history is malformed; ignoring it")
        return []


def _parse_favorites(raw: str | None) -> list[Food]:
    if raw is None:
        return []
    try:
        return _favorites_adapter.validate_json(raw)
    except ValidationError:
        _logger.warning("Stored favorites are malformed; ignoring them")
        return []
