#!/usr/bin/env python3
"""
Compare two heroes from the terminal.

Usage:
    python scripts/compare_heroes.py 1 3
    python scripts/compare_heroes.py 1 3 --json
"""

import argparse
import json
import sys

from superheroes.config import get_data_path
from superheroes.exceptions import SuperheroesError
from superheroes.repositories.hero_repository import HeroRepository
from superheroes.services.hero_service import HeroService
from superheroes.services.presenters import comparison_to_api, comparison_to_markdown


def main():
    parser = argparse.ArgumentParser(description="Compare two superheroes by powerstats")
    parser.add_argument("id1", help="First hero id")
    parser.add_argument("id2", help="Second hero id")
    parser.add_argument("--data-path", default=None, help="Path to superheroes.json")
    parser.add_argument("--json", action="store_true", help="Print the API JSON instead of Markdown")
    args = parser.parse_args()

    service = HeroService(HeroRepository(args.data_path or get_data_path()))
    try:
        result = service.compare(args.id1, args.id2)
    except SuperheroesError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(comparison_to_api(result), indent=2))
    else:
        print(comparison_to_markdown(result))


if __name__ == "__main__":
    main()
