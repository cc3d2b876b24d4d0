"""Data models for the superheroes service."""

from superheroes.models.hero import STAT_CATEGORIES, Hero, Powerstats
from superheroes.models.comparison import CategoryResult, ComparisonResult, Side, count_wins

__all__ = [
    "STAT_CATEGORIES",
    "Hero",
    "Powerstats",
    "CategoryResult",
    "ComparisonResult",
    "Side",
    "count_wins",
]
