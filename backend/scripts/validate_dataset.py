#!/usr/bin/env python3
"""
Validate superheroes.json against the hero schema.

Reports the hero count, any stat values that were coerced to 0, and
values outside the conventional 0-100 range. Exits non-zero if the
dataset cannot be loaded.

Usage:
    python scripts/validate_dataset.py [path/to/superheroes.json]

Without an argument the configured DATA_PATH is used.
"""

import json
import sys
from pathlib import Path

from superheroes.config import get_data_path
from superheroes.exceptions import DataLoadError
from superheroes.models.hero import STAT_CATEGORIES
from superheroes.repositories.hero_repository import HeroRepository


def main():
    if len(sys.argv) > 1:
        data_path = Path(sys.argv[1])
    else:
        data_path = get_data_path()

    repo = HeroRepository(data_path)
    try:
        heroes = repo.load_all()
    except DataLoadError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Loaded {len(heroes)} heroes from {data_path}")

    # Compare against the raw file to spot coerced values
    with open(data_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    coerced = 0
    out_of_range = 0
    for record, hero in zip(raw, heroes):
        raw_stats = record.get("powerstats") or {}
        for category in STAT_CATEGORIES:
            value = hero.powerstats.value_of(category)
            if raw_stats.get(category) != value:
                coerced += 1
                print(f"  {hero.name} ({hero.id}): {category} {raw_stats.get(category)!r} -> {value}")
            if not 0 <= value <= 100:
                out_of_range += 1
                print(f"  {hero.name} ({hero.id}): {category}={value} outside 0-100")

    print(f"Coerced values: {coerced}")
    print(f"Out-of-range values: {out_of_range}")


if __name__ == "__main__":
    main()
