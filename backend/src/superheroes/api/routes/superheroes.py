"""REST endpoints for the superhero dataset and comparisons."""

from fastapi import APIRouter, Request

from superheroes.models.hero import Hero, Powerstats
from superheroes.services.hero_service import HeroService
from superheroes.services.presenters import comparison_to_api, comparison_to_display

router = APIRouter(prefix="/api/superheroes", tags=["superheroes"])


def _get_service(request: Request) -> HeroService:
    """Get or create the hero service from app state."""
    if not hasattr(request.app.state, "hero_service"):
        request.app.state.hero_service = HeroService(request.app.state.repository)
    return request.app.state.hero_service


@router.get("", response_model=list[Hero])
def list_superheroes(request: Request):
    """Return all superheroes."""
    return _get_service(request).list_heroes()


# Declared before /{hero_id} so "compare" is never read as an id
@router.get("/compare")
def compare_superheroes(
    request: Request,
    id1: str | None = None,
    id2: str | None = None,
):
    """Compare two superheroes category by category.

    Winners are positional: 1 for id1, 2 for id2, or "tie".
    """
    result = _get_service(request).compare(id1, id2)
    return comparison_to_api(result)


@router.get("/compare/view")
def compare_superheroes_view(
    request: Request,
    id1: str | None = None,
    id2: str | None = None,
):
    """Comparison display model for the side-by-side view."""
    result = _get_service(request).compare(id1, id2)
    return comparison_to_display(result)


@router.get("/{hero_id}", response_model=Hero)
def get_superhero(request: Request, hero_id: str):
    """Return a single superhero by id."""
    return _get_service(request).get_hero(hero_id)


@router.get("/{hero_id}/powerstats", response_model=Powerstats)
def get_superhero_powerstats(request: Request, hero_id: str):
    """Return the powerstats of a superhero by id."""
    return _get_service(request).get_powerstats(hero_id)
