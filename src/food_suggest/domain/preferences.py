"""User preference and history models."""

import re
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Literal

from food_suggest.domain.foods import Food

Language = Literal["auto", "en", "tr"]

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_LANGUAGES = {"auto", "en", "tr"}


@dataclass(frozen=True)
class DietaryPreferences:
    """Hard dietary constraints applied to every suggestion."""

    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False


@dataclass(frozen=True)
class UserPreferences:
    """Per-installation settings."""

    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    notifications_enabled: bool = False
    notification_time: str = "12:00"
    language: Language = "auto"
    preferred_cuisine: str | None = None

    @property
    def diet(self) -> DietaryPreferences:
        return DietaryPreferences(
            is_vegetarian=self.is_vegetarian,
            is_vegan=self.is_vegan,
            is_gluten_free=self.is_gluten_free,
        )


@dataclass(frozen=True)
class HistoryItem:
    """A food the user was shown, kept as a recently-seen signal."""

    id: str
    food: Food
    mood: str
    timestamp: datetime
    city: str | None = None


def apply_preference_changes(
    current: UserPreferences, changes: dict[str, object]
) -> UserPreferences:
    """Return updated preferences with the vegan/vegetarian cascade applied.

    Turning vegan on forces vegetarian on; turning vegetarian off forces vegan
    off. When one update asks for both, vegan wins.
    """
    unknown = set(changes) - set(UserPreferences.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown preference fields: {sorted(unknown)}")
    time_value = changes.get("notification_time")
    if time_value is not None and not _TIME_PATTERN.match(str(time_value)):
        raise ValueError("notification_time must use HH:MM format")
    language = changes.get("language")
    if language is not None and language not in _LANGUAGES:
        raise ValueError(f"Unsupported language: {language}")

    updated = replace(current, **changes)
    if changes.get("is_vegan") is True:
        return replace(updated, is_vegetarian=True)
    if changes.get("is_vegetarian") is False:
        return replace(updated, is_vegan=False)
    return updated
