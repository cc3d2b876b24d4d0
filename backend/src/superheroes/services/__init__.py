"""Business logic services."""

from superheroes.services.comparison_engine import HeroComparisonEngine
from superheroes.services.hero_service import HeroService
from superheroes.services.presenters import (
    TIE_MARKER,
    comparison_to_api,
    comparison_to_display,
    comparison_to_markdown,
    hero_to_markdown,
)

__all__ = [
    "HeroComparisonEngine",
    "HeroService",
    "TIE_MARKER",
    "comparison_to_api",
    "comparison_to_display",
    "comparison_to_markdown",
    "hero_to_markdown",
]
