"""JSON-file-backed data access for the hero dataset."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from superheroes.exceptions import DataLoadError
from superheroes.models.hero import Hero
from superheroes.utils.normalizers import normalize_hero_id

logger = logging.getLogger(__name__)


class HeroRepository:
    """Read-only access to the heroes stored in a static JSON file."""

    def __init__(self, data_path: str | Path):
        """Initialize with path to the dataset.

        Args:
            data_path: Path to superheroes.json (a JSON array of hero objects).
                       Nothing is read until the first lookup.
        """
        self._data_path = Path(data_path) if isinstance(data_path, str) else data_path
        self._heroes: list[Hero] | None = None
        self._by_id: dict[int, Hero] = {}

    @property
    def data_path(self) -> Path:
        return self._data_path

    @property
    def is_loaded(self) -> bool:
        return self._heroes is not None

    def load_all(self) -> list[Hero]:
        """Return every hero in dataset order, loading the file on first use.

        Raises:
            DataLoadError: If the file is missing, unreadable, not valid JSON,
                or does not match the hero schema. Failures are not cached,
                so the next call reads the file again.
        """
        if self._heroes is None:
            heroes = self._read_dataset()
            self._by_id = {hero.id: hero for hero in heroes}
            self._heroes = heroes
        return list(self._heroes)

    def find_by_id(self, hero_id: int | str) -> Hero | None:
        """Find a hero by id. "1" and 1 are the same id.

        Returns:
            The hero, or None if the id is non-numeric or unknown
        """
        self.load_all()
        normalized = normalize_hero_id(hero_id)
        if normalized is None:
            return None
        return self._by_id.get(normalized)

    def find_by_name_or_id(
        self,
        name: str | None = None,
        hero_id: str | int | None = None,
    ) -> Hero | None:
        """Find the first hero whose name or id matches.

        Name matching is case-insensitive. Id matching compares the hero id
        rendered as a string with ``hero_id`` (also rendered as a string)
        exactly, so "01" does not match hero 1.
        """
        heroes = self.load_all()
        if not name and (hero_id is None or hero_id == ""):
            return None

        id_str = str(hero_id) if hero_id is not None else None

        name_lc = name.lower() if name else None
        for hero in heroes:
            if name_lc is not None and hero.name.lower() == name_lc:
                return hero
            if id_str is not None and str(hero.id) == id_str:
                return hero
        return None

    def _read_dataset(self) -> list[Hero]:
        path = self._data_path
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            logger.error(f"Hero dataset not found: {path}")
            raise DataLoadError(f"Hero dataset not found: {path}") from e
        except OSError as e:
            logger.error(f"Failed to read hero dataset {path}: {e}")
            raise DataLoadError(f"Failed to read hero dataset {path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Hero dataset is not valid JSON ({path}): {e}")
            raise DataLoadError(f"Hero dataset is not valid JSON: {e}") from e

        if not isinstance(raw, list):
            logger.error(f"Hero dataset must be a JSON array, got {type(raw).__name__}")
            raise DataLoadError("Hero dataset must be a JSON array")

        heroes: list[Hero] = []
        seen_ids: set[int] = set()
        for index, record in enumerate(raw):
            try:
                hero = Hero.model_validate(record)
            except ValidationError as e:
                logger.error(f"Invalid hero record at index {index} in {path}: {e}")
                raise DataLoadError(f"Invalid hero record at index {index}: {e}") from e

            if hero.id in seen_ids:
                logger.error(f"Duplicate hero id {hero.id} in {path}")
                raise DataLoadError(f"Duplicate hero id: {hero.id}")
            seen_ids.add(hero.id)
            heroes.append(hero)

        logger.info(f"HeroRepository: Loaded {len(heroes)} heroes from {path}")
        return heroes
