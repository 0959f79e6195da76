"""Food catalog domain models."""

import json
from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, Field, field_validator


@dataclass(frozen=True)
class Food:
    """Immutable catalog entry.

    Dietary flags are stored independently; a vegan entry is not assumed to be
    vegetarian unless the catalog says so.
    """

    id: str
    name: str
    description: str
    emoji: str
    category: str
    moods: tuple[str, ...]
    cuisine: str | None = None
    regions: tuple[str, ...] = ()
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    name_tr: str | None = None
    name_en: str | None = None
    description_tr: str | None = None
    description_en: str | None = None

    def localized_name(self, language: str) -> str:
        """Return the name for a language code, falling back to the raw name."""
        if language == "en" and self.name_en:
            return self.name_en
        if language == "tr" and self.name_tr:
            return self.name_tr
        return self.name

    def localized_description(self, language: str) -> str:
        """Return the description for a language code."""
        if language == "en" and self.description_en:
            return self.description_en
        if language == "tr" and self.description_tr:
            return self.description_tr
        return self.description

    def known_names(self) -> list[str]:
        """Return every non-empty name variant."""
        names = [self.name, self.name_tr, self.name_en]
        return [name for name in names if name]


class RemoteFood(BaseModel):
    """Food row as returned by the remote catalog endpoint."""

    id: str
    name: str | None = None
    name_tr: str | None = Field(
        default=None, validation_alias=AliasChoices("name_tr", "nameTr")
    )
    name_en: str | None = Field(
        default=None, validation_alias=AliasChoices("name_en", "nameEn")
    )
    description: str | None = None
    description_tr: str | None = Field(
        default=None, validation_alias=AliasChoices("description_tr", "descriptionTr")
    )
    description_en: str | None = Field(
        default=None, validation_alias=AliasChoices("description_en", "descriptionEn")
    )
    emoji: str | None = None
    category: str | None = None
    cuisine: str | None = None
    moods: list[str] = Field(default_factory=list)
    regions: list[str] = Field(default_factory=list)
    is_vegetarian: bool = Field(
        default=False, validation_alias=AliasChoices("is_vegetarian", "isVegetarian")
    )
    is_vegan: bool = Field(
        default=False, validation_alias=AliasChoices("is_vegan", "isVegan")
    )
    is_gluten_free: bool = Field(
        default=False, validation_alias=AliasChoices("is_gluten_free", "isGlutenFree")
    )

    @field_validator("moods", "regions", mode="before")
    @classmethod
    def _decode_json_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return json.loads(value) if value.strip() else []
        return value

    @field_validator("is_vegetarian", "is_vegan", "is_gluten_free", mode="before")
    @classmethod
    def _coerce_flag(cls, value: object) -> object:
        if value is None:
            return False
        if isinstance(value, int):
            return bool(value)
        return value

    def to_food(self) -> Food:
        """Translate the remote row into the internal catalog shape."""
        name = self.name_tr or self.name or self.name_en or self.id
        description = self.description_tr or self.description or self.description_en
        return Food(
            id=self.id,
            name=name,
            description=description or "",
            emoji=self.emoji or "🍽️",
            category=self.category or "",
            cuisine=self.cuisine,
            moods=tuple(self.moods),
            regions=tuple(self.regions),
            is_vegetarian=self.is_vegetarian,
            is_vegan=self.is_vegan,
            is_gluten_free=self.is_gluten_free,
            name_tr=self.name_tr,
            name_en=self.name_en,
            description_tr=self.description_tr,
            description_en=self.description_en,
        )
