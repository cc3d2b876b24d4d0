"""Hero and powerstat models.

Heroes are parsed from the dataset with pydantic so that ids and stat values
are normalized once, at ingestion. Both models are frozen: the dataset is
shared read-only for the lifetime of the process.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from superheroes.utils.normalizers import normalize_hero_id, normalize_stat_value

# Canonical category order. Consumers depend on this order.
STAT_CATEGORIES: tuple[str, ...] = (
    "intelligence",
    "strength",
    "speed",
    "durability",
    "power",
    "combat",
)


class Powerstats(BaseModel):
    """The six powerstat values of a hero."""

    model_config = ConfigDict(frozen=True)

    intelligence: int | float = 0
    strength: int | float = 0
    speed: int | float = 0
    durability: int | float = 0
    power: int | float = 0
    combat: int | float = 0

    @field_validator(*STAT_CATEGORIES, mode="before")
    @classmethod
    def _coerce_stat(cls, value: Any) -> int | float:
        return normalize_stat_value(value)

    def value_of(self, category: str) -> int | float:
        """Value for a category name from STAT_CATEGORIES."""
        if category not in STAT_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)


class Hero(BaseModel):
    """A superhero record from the dataset."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    image: str = ""
    powerstats: Powerstats = Field(default_factory=Powerstats)

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> int:
        hero_id = normalize_hero_id(value)
        if hero_id is None:
            raise ValueError(f"invalid hero id: {value!r}")
        return hero_id

    @field_validator("image", mode="before")
    @classmethod
    def _default_image(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("powerstats", mode="before")
    @classmethod
    def _default_powerstats(cls, value: Any) -> Any:
        # A missing or null block means every stat is 0
        return {} if value is None else value
