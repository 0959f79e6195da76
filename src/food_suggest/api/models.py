"""Pydantic request models for the HTTP API."""

from pydantic import BaseModel, Field

from food_suggest.domain.preferences import Language


class RefreshSuggestionsRequest(BaseModel):
    """Request for suggestions excluding foods already shown."""

    mood: str
    exclude_ids: list[str] = Field(default_factory=list)
    city: str | None = None
    count: int = Field(default=4, ge=1, le=20)
    cuisine: str | None = None


class PreferencesUpdate(BaseModel):
    """Partial preference update."""

    is_vegetarian: bool | None = None
    is_vegan: bool | None = None
    is_gluten_free: bool | None = None
    notifications_enabled: bool | None = None
    notification_time: str | None = None
    language: Language | None = None
    preferred_cuisine: str | None = None


class HistoryEntryRequest(BaseModel):
    """Record that a food was shown for a mood."""

    food_id: str
    mood: str
    city: str | None = None


class AIRecommendationRequest(BaseModel):
    """Request for a generative recommendation."""

    mood: str
    city: str | None = None
    mood_label: str | None = None
    mood_description: str | None = None


class PlacesSearchRequest(BaseModel):
    """Restaurant text search around a coordinate."""

    query: str
    latitude: float
    longitude: float
    radius: int = Field(default=2000, gt=0, le=50000)


class PlacesNearbyRequest(BaseModel):
    """Restaurant search around a coordinate."""

    latitude: float
    longitude: float
    radius: int = Field(default=1500, gt=0, le=50000)
