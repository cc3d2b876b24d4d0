"""Category-by-category powerstat comparison between two heroes."""

from superheroes.exceptions import InvalidArgumentError
from superheroes.models.comparison import CategoryResult, ComparisonResult, Side, count_wins
from superheroes.models.hero import STAT_CATEGORIES, Hero


class HeroComparisonEngine:
    """Compares two heroes across the six powerstat categories.

    Each category is worth one point to the hero with the strictly greater
    value; equal values award nothing. The overall winner is the hero with
    more category points, NOT the hero with the larger stat total. A hero
    with a much higher total can still lose 2-4.

    Self-comparison is rejected rather than reported as a six-way tie.
    """

    CATEGORIES = STAT_CATEGORIES

    def compare(self, hero_a: Hero, hero_b: Hero) -> ComparisonResult:
        """Compare two resolved heroes.

        Raises:
            InvalidArgumentError: If both heroes have the same id
        """
        if hero_a.id == hero_b.id:
            raise InvalidArgumentError("Comparing a hero with itself is not allowed")

        categories = tuple(
            self._compare_category(
                category,
                hero_a.powerstats.value_of(category),
                hero_b.powerstats.value_of(category),
            )
            for category in self.CATEGORIES
        )

        wins_a = count_wins(categories, Side.A)
        wins_b = count_wins(categories, Side.B)

        return ComparisonResult(
            hero_a=hero_a,
            hero_b=hero_b,
            categories=categories,
            overall_winner=self._pick_winner(wins_a, wins_b),
        )

    @staticmethod
    def _compare_category(category: str, value_a: int | float, value_b: int | float) -> CategoryResult:
        return CategoryResult(
            category=category,
            value_a=value_a,
            value_b=value_b,
            winner=HeroComparisonEngine._pick_winner(value_a, value_b),
        )

    @staticmethod
    def _pick_winner(a: int | float, b: int | float) -> Side:
        if a > b:
            return Side.A
        if b > a:
            return Side.B
        return Side.TIE
