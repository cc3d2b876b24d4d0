"""Hero lookup and comparison entry point shared by the API, MCP server and scripts."""

import logging

from superheroes.exceptions import HeroNotFoundError, InvalidArgumentError
from superheroes.models.comparison import ComparisonResult
from superheroes.models.hero import Hero, Powerstats
from superheroes.repositories.hero_repository import HeroRepository
from superheroes.services.comparison_engine import HeroComparisonEngine
from superheroes.utils.normalizers import normalize_hero_id

logger = logging.getLogger(__name__)


class HeroService:
    """Resolves raw identifiers against the repository and runs comparisons."""

    def __init__(
        self,
        repository: HeroRepository,
        engine: HeroComparisonEngine | None = None,
    ):
        self.repository = repository
        self.engine = engine or HeroComparisonEngine()

    def list_heroes(self) -> list[Hero]:
        return self.repository.load_all()

    def get_hero(self, raw_id: int | str) -> Hero:
        """Resolve a hero by id.

        Non-numeric and unknown ids are indistinguishable: both raise
        HeroNotFoundError.
        """
        hero = self.repository.find_by_id(raw_id)
        if hero is None:
            raise HeroNotFoundError()
        return hero

    def get_powerstats(self, raw_id: int | str) -> Powerstats:
        return self.get_hero(raw_id).powerstats

    def compare(self, raw_id1: int | str | None, raw_id2: int | str | None) -> ComparisonResult:
        """Validate two identifiers, resolve them and compare the heroes.

        Raises:
            InvalidArgumentError: If an id is missing, non-numeric, or both ids are equal
            HeroNotFoundError: If either id does not resolve to a hero
            DataLoadError: If the dataset cannot be loaded
        """
        if raw_id1 is None or raw_id2 is None or raw_id1 == "" or raw_id2 == "":
            raise InvalidArgumentError("Both id1 and id2 query parameters are required")

        id1 = normalize_hero_id(raw_id1)
        id2 = normalize_hero_id(raw_id2)
        if id1 is None or id2 is None:
            raise InvalidArgumentError("id1 and id2 must be valid numeric identifiers")

        if id1 == id2:
            raise InvalidArgumentError("Comparing a hero with itself is not allowed")

        hero_a = self.get_hero(id1)
        hero_b = self.get_hero(id2)

        result = self.engine.compare(hero_a, hero_b)
        logger.debug(
            f"Compared {hero_a.name} vs {hero_b.name}: "
            f"{result.wins_a}-{result.wins_b} ({result.overall_winner.value})"
        )
        return result

    def lookup(self, name: str | None = None, hero_id: str | int | None = None) -> Hero:
        """Find a hero by case-insensitive name or exact string id."""
        hero = self.repository.find_by_name_or_id(name=name, hero_id=hero_id)
        if hero is None:
            raise HeroNotFoundError()
        return hero
