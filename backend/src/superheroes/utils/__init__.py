"""Utility modules for superheroes."""

from superheroes.utils.normalizers import (
    normalize_hero_id,
    normalize_stat_value,
)

__all__ = [
    "normalize_hero_id",
    "normalize_stat_value",
]
