"""Tests for the hero service."""

import json

import pytest

from superheroes.config import get_data_path
from superheroes.exceptions import DataLoadError, HeroNotFoundError, InvalidArgumentError
from superheroes.models.comparison import Side
from superheroes.repositories.hero_repository import HeroRepository
from superheroes.services.hero_service import HeroService


@pytest.fixture
def service():
    return HeroService(HeroRepository(get_data_path()))


def test_get_hero_by_string_id(service):
    assert service.get_hero("1").name == "A-Bomb"


@pytest.mark.parametrize("raw_id", ["9999", "abc", 9999])
def test_get_hero_not_found(service, raw_id):
    with pytest.raises(HeroNotFoundError, match="Superhero not found"):
        service.get_hero(raw_id)


def test_get_powerstats(service):
    stats = service.get_powerstats(2)
    assert stats.intelligence == 100
    assert stats.strength == 18


def test_compare_resolves_string_ids(service):
    result = service.compare("3", "2")
    assert result.hero_a.name == "Bane"
    assert result.hero_b.name == "Ant-Man"
    assert result.overall_winner is Side.A


@pytest.mark.parametrize("id1,id2", [(None, "2"), ("1", None), ("", "2"), (None, None)])
def test_compare_missing_ids(service, id1, id2):
    with pytest.raises(InvalidArgumentError, match="Both id1 and id2"):
        service.compare(id1, id2)


@pytest.mark.parametrize("id1,id2", [("abc", "2"), ("1", "2.5"), ("x", "y")])
def test_compare_non_numeric_ids(service, id1, id2):
    with pytest.raises(InvalidArgumentError, match="must be valid numeric"):
        service.compare(id1, id2)


def test_compare_same_id_rejected(service):
    with pytest.raises(InvalidArgumentError, match="Comparing a hero with itself"):
        service.compare("1", "1")


def test_compare_same_id_different_spelling_rejected(service):
    with pytest.raises(InvalidArgumentError, match="itself"):
        service.compare("1", " 1 ")


def test_compare_unknown_id(service):
    with pytest.raises(HeroNotFoundError):
        service.compare("1", "9999")


def test_compare_data_load_error_propagates(tmp_path):
    service = HeroService(HeroRepository(tmp_path / "missing.json"))
    with pytest.raises(DataLoadError):
        service.compare("1", "2")


def test_validation_happens_before_loading(tmp_path):
    service = HeroService(HeroRepository(tmp_path / "missing.json"))
    with pytest.raises(InvalidArgumentError):
        service.compare("abc", "2")


def test_lookup_by_name(service):
    assert service.lookup(name="ant-man").id == 2


def test_lookup_by_id(service):
    assert service.lookup(hero_id="3").name == "Bane"


def test_lookup_not_found(service):
    with pytest.raises(HeroNotFoundError, match="Superhero not found"):
        service.lookup(name="Nobody")


def test_lookup_without_arguments(service):
    with pytest.raises(HeroNotFoundError):
        service.lookup()


def test_list_heroes(tmp_path):
    path = tmp_path / "heroes.json"
    path.write_text(json.dumps([{"id": 1, "name": "Solo"}]), encoding="utf-8")
    service = HeroService(HeroRepository(path))
    assert [h.name for h in service.list_heroes()] == ["Solo"]


def test_lookup_by_int_id(service):
    assert service.lookup(hero_id=2).name == "Ant-Man"
