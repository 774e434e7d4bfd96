"""Tests for region normalization and matching."""

import pytest

from cellar.services.region_matcher import RegionMatcher, normalize_region


class TestNormalizeRegion:
    @pytest.mark.parametrize("raw, expected", [
        ("Rioja", "rioja"),
        ("  RIOJA  ", "rioja"),
        ("Côtes-du-Rhône", "cotes du rhone"),
        ("Ribera del Duero", "ribera del duero"),
        ("ribera-del-duero", "ribera del duero"),
        ("Rías Baixas", "rias baixas"),
        ("Penedès", "penedes"),
        ("", ""),
        ("---", ""),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_region(raw) == expected


@pytest.fixture
def matcher():
    return RegionMatcher()


@pytest.fixture
def strict_matcher():
    return RegionMatcher(fuzzy=False)


class TestExactAndWordMatch:
    def test_exact_region(self, strict_matcher):
        assert strict_matcher.matches("rioja", "Rioja")

    def test_accents_ignored(self, strict_matcher):
        assert strict_matcher.matches("cote rotie", "Côte-Rôtie")

    def test_country_match(self, strict_matcher):
        assert strict_matcher.matches("spain", "Priorat", "Spain")

    def test_word_inside_region(self, strict_matcher):
        assert strict_matcher.matches("rioja", "Rioja Alta")
        assert strict_matcher.matches("napa", "Napa Valley")

    def test_partial_word_does_not_match(self, strict_matcher):
        assert not strict_matcher.matches("rio", "Rioja")

    def test_different_region(self, strict_matcher):
        assert not strict_matcher.matches("rioja", "Priorat", "Spain")

    def test_missing_region_and_country(self, matcher):
        assert not matcher.matches("rioja", None, None)
        assert not matcher.matches("rioja", "", None)

    def test_blank_query(self, matcher):
        assert not matcher.matches("   ", "Rioja")


class TestFuzzyMatch:
    def test_typo_tolerated(self, matcher):
        assert matcher.matches("riojha", "Rioja")
        assert matcher.matches("bordeuax", "Bordeaux")

    def test_typo_in_multiword_region(self, matcher):
        assert matcher.matches("barosa", "Barossa Valley")

    def test_typo_rejected_when_fuzzy_disabled(self, strict_matcher):
        assert not strict_matcher.matches("riojha", "Rioja")

    def test_short_queries_never_fuzzy(self, matcher):
        assert not matcher.matches("ria", "Rioja")

    def test_unrelated_regions_stay_apart(self, matcher):
        assert not matcher.matches("rioja", "Priorat")
        assert not matcher.matches("rioja", "Rías Baixas")
        assert not matcher.matches("mosel", "Marlborough")

    def test_custom_threshold(self):
        lenient = RegionMatcher(threshold=0.5)
        assert lenient.matches("rioja", "Priorat")

    def test_best_score_range(self, matcher):
        score = matcher.best_score("rioja", "rioja alta")
        assert 0.0 <= score <= 1.0
        assert matcher.best_score("rioja", "rioja") == pytest.approx(1.0)
