"""Tests for identifier and stat normalization."""

import pytest

from superheroes.utils.normalizers import normalize_hero_id, normalize_stat_value


class TestNormalizeHeroId:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, 1),
            ("1", 1),
            (" 42 ", 42),
            (7.0, 7),
            ("-3", -3),
        ],
    )
    def test_valid_ids(self, value, expected):
        assert normalize_hero_id(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "   ", "1.5", 1.5, None, True, [1], "1e3"])
    def test_invalid_ids(self, value):
        assert normalize_hero_id(value) is None

    def test_string_and_int_are_equivalent(self):
        assert normalize_hero_id("1") == normalize_hero_id(1)


class TestNormalizeStatValue:
    def test_int_passes_through(self):
        assert normalize_stat_value(38) == 38
        assert isinstance(normalize_stat_value(38), int)

    def test_numeric_string_is_parsed(self):
        assert normalize_stat_value("38") == 38
        assert normalize_stat_value("12.5") == 12.5

    def test_whole_float_becomes_int(self):
        result = normalize_stat_value(50.0)
        assert result == 50
        assert isinstance(result, int)

    @pytest.mark.parametrize("value", [None, "null", "", "abc", float("nan"), float("inf"), {}, [], False])
    def test_missing_or_non_numeric_is_zero(self, value):
        assert normalize_stat_value(value) == 0

    def test_out_of_range_is_kept(self):
        assert normalize_stat_value(150) == 150
        assert normalize_stat_value(-5) == -5
