"""
Enums for type-safe string constants in Wine Cellar.
"""

from enum import Enum


class WineType(str, Enum):
    """Wine style category used as the /wine filter key."""
    BOLD_RED = "BOLD_RED"
    MEDIUM_RED = "MEDIUM_RED"
    LIGHT_RED = "LIGHT_RED"
    ROSE = "ROSE"
    RICH_WHITE = "RICH_WHITE"
    LIGHT_WHITE = "LIGHT_WHITE"
    SPARKLING = "SPARKLING"
    DESSERT = "DESSERT"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Bold Red'."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.value


_LABELS = {
    WineType.BOLD_RED: "Bold Red",
    WineType.MEDIUM_RED: "Medium Red",
    WineType.LIGHT_RED: "Light Red",
    WineType.ROSE: "Rosé",
    WineType.RICH_WHITE: "Rich White",
    WineType.LIGHT_WHITE: "Light White",
    WineType.SPARKLING: "Sparkling",
    WineType.DESSERT: "Dessert",
}


class QueryStatus(str, Enum):
    """Outcome of a wine query, echoed in the response envelope."""
    SUCCESS = "SUCCESS"
    INVALID_REQUEST = "INVALID_REQUEST"
    ERROR = "ERROR"
