"""
/wine endpoints for Wine Cellar.

GET /wine filters the cellar by wine type and region and returns the
{status, description, wines} envelope. Companion endpoints list the
wine types and regions a client can ask for.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..exceptions import InvalidQueryError
from ..feature_flags import FeatureFlags, get_feature_flags
from ..models import QueryStatus, RegionsResponse, WineQueryResult, WineType, WineTypeInfo
from ..services.pairing import PairingService
from ..services.region_matcher import RegionMatcher
from ..services.wine_lookup import WineLookupService
from ..services.wine_repository import WineRepository

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_repository() -> WineRepository:
    """Get or create wine repository (lazy singleton)."""
    if not hasattr(_get_repository, "_instance"):
        _get_repository._instance = WineRepository()
    return _get_repository._instance


def get_lookup_service(flags: FeatureFlags = Depends(get_feature_flags)) -> WineLookupService:
    """Build the lookup service for this request from the current feature flags."""
    return WineLookupService(
        repository=_get_repository(),
        region_matcher=RegionMatcher(fuzzy=flags.feature_fuzzy_regions),
        pairing_service=PairingService() if flags.feature_pairings else None,
    )


def envelope_response(status_code: int, status: QueryStatus, description: str) -> JSONResponse:
    """Error response in the /wine envelope shape, with an empty wine list."""
    result = WineQueryResult.failure(status, description)
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


@router.get("/wine", response_model=WineQueryResult)
def get_wines(
    wine_type: WineType = Query(..., alias="wineType", description="Wine style category"),
    region: str = Query(..., description="Region or country, e.g. 'rioja'"),
    limit: Optional[int] = Query(default=None, description="Max wines to return (1-50)"),
    service: WineLookupService = Depends(get_lookup_service),
):
    """
    Get wines of a type from a region.

    Returns SUCCESS with the matching wines, best rated first. An unknown
    region is not an error: the wine list is simply empty.
    """
    try:
        return service.lookup(wine_type, region, limit)
    except InvalidQueryError as e:
        logger.info(f"Rejected wine query: {e}")
        return envelope_response(400, QueryStatus.INVALID_REQUEST, str(e))
    except Exception as e:
        logger.error(f"Error looking up wines: {e}", exc_info=True)
        return envelope_response(500, QueryStatus.ERROR, "Internal server error")


@router.get("/wine/types", response_model=list[WineTypeInfo])
def get_wine_types(service: WineLookupService = Depends(get_lookup_service)) -> list[WineTypeInfo]:
    """List every wine type accepted by the wineType parameter."""
    return service.wine_types()


@router.get("/wine/regions", response_model=RegionsResponse)
def get_regions(
    wine_type: Optional[WineType] = Query(default=None, alias="wineType"),
    service: WineLookupService = Depends(get_lookup_service),
):
    """List the regions present in the cellar, optionally for one wine type."""
    try:
        return RegionsResponse(regions=service.regions(wine_type))
    except Exception as e:
        logger.error(f"Error listing regions: {e}", exc_info=True)
        return envelope_response(500, QueryStatus.ERROR, "Internal server error")
