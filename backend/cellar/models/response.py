"""
Pydantic models for the Wine Cellar API response.

API Contract (DO NOT CHANGE):
{
  "status": "SUCCESS",
  "description": "SUCCESS",
  "wines": [
    {
      "name": "string",
      "wine_type": "BOLD_RED",
      "region": "Rioja",
      "rating": 4.3
    }
  ]
}
"""

from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import QueryStatus, WineType

SUCCESS = QueryStatus.SUCCESS.value


class Wine(BaseModel):
    """A wine returned by a cellar query."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Wine name")
    wine_type: WineType = Field(..., description="Style category")
    region: str = Field(..., description="Wine region (e.g., 'Rioja', 'Barossa Valley')")
    country: Optional[str] = Field(None, description="Country of origin")
    winery: Optional[str] = Field(None, description="Winery or producer")
    varietal: Optional[str] = Field(None, description="Grape varietal (e.g., 'Tempranillo')")
    vintage: Optional[int] = Field(None, description="Vintage year, None for non-vintage")
    rating: Optional[float] = Field(None, description="Star rating (1-5), None if unrated")
    pairing: Optional[str] = Field(None, description="Suggested food pairing")

    @field_validator('rating')
    @classmethod
    def validate_rating_range(cls, v: Optional[float]) -> Optional[float]:
        """Validate rating is in range 1-5 when not None."""
        if v is not None and (v < 1 or v > 5):
            raise ValueError('rating must be between 1 and 5')
        return v


class WineQueryResult(BaseModel):
    """Response envelope from /wine. `wines` is never null and serializes as a JSON array."""
    model_config = ConfigDict(frozen=True)

    status: str = Field(..., description="Status code, SUCCESS on a resolved query")
    description: str = Field(..., description="Human-readable status description")
    wines: tuple[Wine, ...] = Field(default_factory=tuple, description="Matching wines, best rated first")

    @classmethod
    def success(cls, wines: Sequence[Wine]) -> "WineQueryResult":
        return cls(status=SUCCESS, description=SUCCESS, wines=tuple(wines))

    @classmethod
    def failure(cls, status: QueryStatus, description: str) -> "WineQueryResult":
        return cls(status=status.value, description=description, wines=())


class WineTypeInfo(BaseModel):
    """A WineType member as listed by /wine/types."""
    value: WineType
    label: str


class RegionsResponse(BaseModel):
    """Response from /wine/regions."""
    regions: list[str] = Field(default_factory=list)
