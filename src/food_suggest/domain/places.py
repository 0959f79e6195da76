"""Nearby restaurant models."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Review:
    """Short restaurant review."""

    author_name: str
    relative_time: str
    rating: float | None
    text: str
    author_photo_url: str | None = None


@dataclass(frozen=True)
class NearbyRestaurant:
    """Restaurant near the user, ready for display."""

    id: str
    name: str
    address: str
    rating: float | None = None
    user_ratings_total: int | None = None
    price_level: str = ""
    is_open: bool | None = None
    photo_url: str | None = None
    types: list[str] = field(default_factory=list)
    distance: str | None = None
    reviews: list[Review] = field(default_factory=list)


class _LocalizedText(BaseModel):
    text: str = ""


class _LatLng(BaseModel):
    latitude: float | None = None
    longitude: float | None = None


class _OpeningHours(BaseModel):
    open_now: bool | None = Field(default=None, alias="openNow")


class _AuthorAttribution(BaseModel):
    display_name: str | None = Field(default=None, alias="displayName")
    photo_uri: str | None = Field(default=None, alias="photoUri")


class PlaceReviewPayload(BaseModel):
    """Review as returned by the places search provider."""

    rating: float | None = None
    relative_publish_time: str = Field(
        default="", alias="relativePublishTimeDescription"
    )
    text: _LocalizedText | None = None
    author: _AuthorAttribution | None = Field(default=None, alias="authorAttribution")


class PlacePayload(BaseModel):
    """Place record from the proxy's normalized `places` envelope."""

    id: str
    display_name: _LocalizedText | None = Field(default=None, alias="displayName")
    formatted_address: str = Field(default="", alias="formattedAddress")
    rating: float | None = None
    user_rating_count: int | None = Field(default=None, alias="userRatingCount")
    price_level: str | None = Field(default=None, alias="priceLevel")
    current_opening_hours: _OpeningHours | None = Field(
        default=None, alias="currentOpeningHours"
    )
    photo_url: str | None = Field(default=None, alias="photoUrl")
    types: list[str] = Field(default_factory=list)
    location: _LatLng | None = None
    reviews: list[PlaceReviewPayload] = Field(default_factory=list)
