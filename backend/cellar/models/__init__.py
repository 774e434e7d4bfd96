from .enums import (
    WineType,
    QueryStatus,
)
from .response import (
    SUCCESS,
    Wine,
    WineQueryResult,
    WineTypeInfo,
    RegionsResponse,
)

__all__ = [
    "WineType",
    "QueryStatus",
    "SUCCESS",
    "Wine",
    "WineQueryResult",
    "WineTypeInfo",
    "RegionsResponse",
]
