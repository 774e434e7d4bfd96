"""Tests for WineLookupService, built directly without the HTTP layer."""

import pytest
from pydantic import ValidationError

from cellar.exceptions import CellarError, InvalidQueryError
from cellar.models import SUCCESS, WineQueryResult, WineType
from cellar.services.pairing import PairingService
from cellar.services.region_matcher import RegionMatcher
from cellar.services.wine_lookup import WineLookupService


@pytest.fixture
def service(seeded_repo):
    return WineLookupService(seeded_repo, RegionMatcher(), PairingService())


class TestLookup:
    def test_bold_red_rioja(self, service):
        result = service.lookup(WineType.BOLD_RED, "rioja")

        assert isinstance(result, WineQueryResult)
        assert result.status == SUCCESS
        assert result.description == result.status
        assert len(result.wines) == 4
        assert {w.region for w in result.wines} == {"Rioja", "Rioja Alta"}

    def test_region_is_stripped(self, service):
        assert service.lookup(WineType.BOLD_RED, "  rioja ").wines == service.lookup(WineType.BOLD_RED, "rioja").wines

    def test_country_query(self, service):
        result = service.lookup(WineType.DESSERT, "Portugal")
        assert [w.name for w in result.wines] == ["Taylor's 20 Year Old Tawny Port"]

    def test_no_match_is_empty_success(self, service):
        result = service.lookup(WineType.SPARKLING, "Mendoza")
        assert result.status == SUCCESS
        assert result.wines == ()

    def test_limit(self, service):
        result = service.lookup(WineType.BOLD_RED, "spain", limit=3)
        assert len(result.wines) == 3
        assert result.wines[0].name == "Vega Sicilia Único"

    def test_default_limit_from_environment(self, service, monkeypatch):
        monkeypatch.setenv("DEFAULT_LIMIT", "1")
        assert len(service.lookup(WineType.BOLD_RED, "spain").wines) == 1

    def test_ties_ordered_by_name(self, repo):
        repo.add_wine(name="Zeta", wine_type=WineType.ROSE, region="Tavel", rating=4.0)
        repo.add_wine(name="Alpha", wine_type=WineType.ROSE, region="Tavel", rating=4.0)
        repo.add_wine(name="Unrated", wine_type=WineType.ROSE, region="Tavel")

        result = WineLookupService(repo).lookup(WineType.ROSE, "tavel")
        assert [w.name for w in result.wines] == ["Alpha", "Zeta", "Unrated"]

    def test_pairings_attached(self, service):
        result = service.lookup(WineType.LIGHT_WHITE, "marlborough")
        assert result.wines[0].pairing == "Goat cheese, oysters, green salads"

    def test_pairings_omitted_without_service(self, seeded_repo):
        result = WineLookupService(seeded_repo).lookup(WineType.LIGHT_WHITE, "marlborough")
        assert result.wines[0].pairing is None

    def test_result_is_immutable(self, service):
        result = service.lookup(WineType.BOLD_RED, "rioja")
        with pytest.raises(Exception):
            result.status = "CHANGED"


class TestLookupErrors:
    @pytest.mark.parametrize("region", ["", "   ", None])
    def test_blank_region(self, service, region):
        with pytest.raises(InvalidQueryError):
            service.lookup(WineType.BOLD_RED, region)

    @pytest.mark.parametrize("limit", [0, -1, 51])
    def test_limit_out_of_range(self, service, limit):
        with pytest.raises(InvalidQueryError):
            service.lookup(WineType.BOLD_RED, "rioja", limit=limit)

    def test_invalid_query_is_cellar_error(self):
        assert issubclass(InvalidQueryError, CellarError)


class TestCatalogQueries:
    def test_wine_types(self, service):
        types = service.wine_types()
        assert [t.value for t in types] == list(WineType)
        assert types[3].label == "Rosé"

    def test_regions(self, service):
        assert "Rioja" in service.regions()
        assert service.regions(WineType.LIGHT_RED) == ["Beaujolais", "Bourgogne", "Willamette Valley"]


class TestWineQueryResult:
    def test_round_trip_preserves_fields(self, service):
        result = service.lookup(WineType.BOLD_RED, "rioja")

        restored = WineQueryResult.model_validate_json(result.model_dump_json())
        assert restored == result
        assert isinstance(restored.wines, tuple)

    def test_wines_cannot_be_modified(self, service):
        result = service.lookup(WineType.BOLD_RED, "rioja")

        assert not hasattr(result.wines, "append")
        with pytest.raises(ValidationError):
            result.wines[0].rating = 1.0

    def test_success_accepts_a_list(self):
        assert WineQueryResult.success([]).wines == ()

    def test_empty_wines_serialized_as_array(self):
        data = WineQueryResult.success([]).model_dump(mode="json")
        assert data == {"status": SUCCESS, "description": SUCCESS, "wines": []}

    def test_wine_type_serialized_as_name(self, service):
        data = service.lookup(WineType.BOLD_RED, "rioja").model_dump(mode="json")
        assert data["wines"][0]["wine_type"] == "BOLD_RED"
