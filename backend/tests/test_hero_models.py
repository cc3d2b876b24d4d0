"""Tests for hero and comparison models."""

import pytest
from pydantic import ValidationError

from superheroes.models.comparison import CategoryResult, ComparisonResult, Side, count_wins
from superheroes.models.hero import STAT_CATEGORIES, Hero, Powerstats


def test_stat_categories_canonical_order():
    assert STAT_CATEGORIES == ("intelligence", "strength", "speed", "durability", "power", "combat")


def test_hero_id_string_normalized():
    hero = Hero.model_validate({"id": "12", "name": "Test", "image": "x.png", "powerstats": {}})
    assert hero.id == 12


def test_hero_rejects_non_numeric_id():
    with pytest.raises(ValidationError):
        Hero.model_validate({"id": "abc", "name": "Test"})


def test_hero_rejects_empty_name():
    with pytest.raises(ValidationError):
        Hero.model_validate({"id": 1, "name": ""})


def test_missing_powerstats_default_to_zero():
    hero = Hero.model_validate({"id": 1, "name": "Nobody", "powerstats": None})
    for category in STAT_CATEGORIES:
        assert hero.powerstats.value_of(category) == 0


def test_powerstats_coerce_bad_values():
    stats = Powerstats.model_validate({"intelligence": "null", "strength": "55", "speed": None})
    assert stats.intelligence == 0
    assert stats.strength == 55
    assert stats.speed == 0
    assert stats.combat == 0


def test_powerstats_value_of_unknown_category():
    with pytest.raises(KeyError):
        Powerstats().value_of("charisma")


def test_hero_is_frozen():
    hero = Hero(id=1, name="A-Bomb")
    with pytest.raises(ValidationError):
        hero.name = "B-Bomb"


def test_side_mirrored():
    assert Side.A.mirrored() is Side.B
    assert Side.B.mirrored() is Side.A
    assert Side.TIE.mirrored() is Side.TIE


def test_comparison_result_counts():
    a = Hero(id=1, name="A")
    b = Hero(id=2, name="B")
    result = ComparisonResult(
        hero_a=a,
        hero_b=b,
        categories=(
            CategoryResult("intelligence", 10, 5, Side.A),
            CategoryResult("strength", 5, 10, Side.B),
            CategoryResult("speed", 5, 5, Side.TIE),
        ),
        overall_winner=Side.TIE,
    )
    assert result.wins_a == 1
    assert result.wins_b == 1
    assert result.tied_categories == ["speed"]
    assert result.winner_hero is None


def test_hero_null_image_becomes_empty():
    hero = Hero.model_validate({"id": 1, "name": "No Picture", "image": None})
    assert hero.image == ""


def test_comparison_result_requires_categories_and_winner():
    """A result that was never computed cannot pass for a tie."""
    a = Hero(id=1, name="A")
    b = Hero(id=2, name="B")
    with pytest.raises(TypeError):
        ComparisonResult(hero_a=a, hero_b=b)
    with pytest.raises(TypeError):
        ComparisonResult(hero_a=a, hero_b=b, categories=())


def test_count_wins():
    categories = (
        CategoryResult("intelligence", 10, 5, Side.A),
        CategoryResult("strength", 10, 5, Side.A),
        CategoryResult("speed", 5, 10, Side.B),
        CategoryResult("power", 5, 5, Side.TIE),
    )
    assert count_wins(categories, Side.A) == 2
    assert count_wins(categories, Side.B) == 1
    assert count_wins(categories, Side.TIE) == 1
