"""
Wine lookup service.

Answers pairing requests: a wine type plus a free-text region yields a
WineQueryResult envelope. The repository is a read-only collaborator;
the service is built explicitly and holds no per-request state.
"""

import logging
from typing import Optional

from ..config import Config
from ..exceptions import InvalidQueryError
from ..models import Wine, WineQueryResult, WineType, WineTypeInfo
from .pairing import PairingService
from .region_matcher import RegionMatcher
from .wine_repository import WineRecord, WineRepository

logger = logging.getLogger(__name__)


class WineLookupService:
    """Filter the cellar by wine type and region."""

    def __init__(
        self,
        repository: WineRepository,
        region_matcher: Optional[RegionMatcher] = None,
        pairing_service: Optional[PairingService] = None,
    ):
        """
        Args:
            repository: Catalog to read from.
            region_matcher: Region matching strategy. Defaults to fuzzy matching on.
            pairing_service: Attaches food pairings; None disables pairings.
        """
        self.repository = repository
        self.region_matcher = region_matcher or RegionMatcher()
        self.pairing_service = pairing_service

    def lookup(self, wine_type: WineType, region: str, limit: Optional[int] = None) -> WineQueryResult:
        """
        Find wines of a type from a region.

        Returns SUCCESS with a possibly empty wine list. Raises
        InvalidQueryError for a blank region or out-of-range limit.
        """
        region = (region or "").strip()
        if not region:
            raise InvalidQueryError("region must not be blank")

        if limit is None:
            limit = Config.default_limit()
        if not Config.MIN_LIMIT <= limit <= Config.MAX_LIMIT:
            raise InvalidQueryError(
                f"limit must be between {Config.MIN_LIMIT} and {Config.MAX_LIMIT}"
            )

        candidates = self.repository.find_by_type(wine_type)
        matched = [
            record for record in candidates
            if self.region_matcher.matches(region, record.region, record.country)
        ]
        matched.sort(key=_sort_key)

        logger.debug(
            f"lookup wine_type={wine_type.value} region={region!r}: "
            f"{len(matched)}/{len(candidates)} matched"
        )
        return WineQueryResult.success([self._to_wine(r) for r in matched[:limit]])

    def wine_types(self) -> list[WineTypeInfo]:
        """Every WineType with its display label, in declaration order."""
        return [WineTypeInfo(value=t, label=t.label) for t in WineType]

    def regions(self, wine_type: Optional[WineType] = None) -> list[str]:
        """Distinct regions in the cellar."""
        return self.repository.list_regions(wine_type)

    def _to_wine(self, record: WineRecord) -> Wine:
        pairing = None
        if self.pairing_service is not None:
            pairing = self.pairing_service.get_pairing(record.varietal, record.wine_type)

        return Wine(
            name=record.name,
            wine_type=record.wine_type,
            region=record.region,
            country=record.country,
            winery=record.winery,
            varietal=record.varietal,
            vintage=record.vintage,
            rating=record.rating,
            pairing=pairing,
        )


def _sort_key(record: WineRecord) -> tuple:
    # Best rated first, unrated last, then alphabetical
    return (record.rating is None, -(record.rating or 0.0), record.name.lower())
