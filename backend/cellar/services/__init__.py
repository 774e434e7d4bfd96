from .wine_repository import WineRepository, WineRecord
from .region_matcher import RegionMatcher, normalize_region
from .pairing import PairingService
from .wine_lookup import WineLookupService

__all__ = [
    "WineRepository",
    "WineRecord",
    "RegionMatcher",
    "normalize_region",
    "PairingService",
    "WineLookupService",
]
