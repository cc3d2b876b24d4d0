"""Comparison result models."""

from dataclasses import dataclass
from enum import Enum

from superheroes.models.hero import Hero


class Side(str, Enum):
    """Which side of a comparison won. TIE is the explicit tie marker."""

    A = "a"
    B = "b"
    TIE = "tie"

    def mirrored(self) -> "Side":
        if self is Side.A:
            return Side.B
        if self is Side.B:
            return Side.A
        return Side.TIE


@dataclass(frozen=True)
class CategoryResult:
    """Outcome of a single powerstat category."""

    category: str
    value_a: int | float
    value_b: int | float
    winner: Side


def count_wins(categories: tuple[CategoryResult, ...] | list[CategoryResult], side: Side) -> int:
    """Number of categories won by ``side``."""
    return sum(1 for c in categories if c.winner is side)


@dataclass(frozen=True)
class ComparisonResult:
    """Full category-by-category comparison of two heroes."""

    hero_a: Hero
    hero_b: Hero
    categories: tuple[CategoryResult, ...]
    overall_winner: Side

    @property
    def wins_a(self) -> int:
        """Number of categories won by hero A."""
        return count_wins(self.categories, Side.A)

    @property
    def wins_b(self) -> int:
        """Number of categories won by hero B."""
        return count_wins(self.categories, Side.B)

    @property
    def tied_categories(self) -> list[str]:
        return [c.category for c in self.categories if c.winner is Side.TIE]

    @property
    def winner_hero(self) -> Hero | None:
        """The winning hero, or None on an overall tie."""
        if self.overall_winner is Side.A:
            return self.hero_a
        if self.overall_winner is Side.B:
            return self.hero_b
        return None
