"""
Food pairing service for cellar wines.

Varietal lookup first, then a per-WineType fallback so every wine
returned by /wine can carry a tailored pairing suggestion.
"""

from typing import Optional

from ..models.enums import WineType
from .region_matcher import normalize_region

VARIETAL_PAIRINGS: dict[str, str] = {
    "tempranillo": "Roast lamb, chorizo, aged manchego",
    "garnacha": "Grilled pork, roasted peppers, paella",
    "grenache": "Grilled pork, roasted peppers, paella",
    "cabernet sauvignon": "Ribeye steak, lamb chops, hard cheese",
    "malbec": "Grilled steak, empanadas, blue cheese",
    "syrah": "Smoked brisket, BBQ ribs, venison",
    "shiraz": "Smoked brisket, BBQ ribs, venison",
    "nebbiolo": "Truffle risotto, braised beef, porcini",
    "monastrell": "Slow-cooked stews, game, chargrilled meats",
    "mourvedre": "Slow-cooked stews, game, chargrilled meats",
    "merlot": "Roast chicken, mushroom pasta, meatloaf",
    "sangiovese": "Tomato pasta, pizza, salami",
    "zinfandel": "Burgers, pulled pork, pizza",
    "pinot noir": "Salmon, duck breast, mushrooms",
    "gamay": "Charcuterie, roast chicken, picnic food",
    "chardonnay": "Lobster, creamy pasta, roast chicken",
    "viognier": "Mild curry, rich fish, apricot glaze",
    "viura": "Grilled fish, white asparagus, tapas",
    "sauvignon blanc": "Goat cheese, oysters, green salads",
    "albarino": "Ceviche, grilled shrimp, octopus",
    "riesling": "Thai dishes, pork belly, spicy food",
    "gruner veltliner": "Schnitzel, white fish, Asian greens",
    "verdejo": "Tapas, seafood, fresh salads",
    "pinot grigio": "Light fish, sushi, antipasto",
    "champagne blend": "Oysters, fried chicken, caviar",
    "glera": "Prosciutto, light appetizers, brunch",
    "macabeo": "Jamón, fried seafood, almonds",
    "pedro ximenez": "Vanilla ice cream, blue cheese, figs",
    "semillon": "Foie gras, crème brûlée, blue cheese",
    "touriga nacional": "Dark chocolate, walnuts, Stilton",
}

TYPE_PAIRINGS: dict[WineType, str] = {
    WineType.BOLD_RED: "Red meat, aged cheese, hearty stews",
    WineType.MEDIUM_RED: "Roast poultry, pasta, grilled vegetables",
    WineType.LIGHT_RED: "Salmon, mushrooms, charcuterie",
    WineType.ROSE: "Salads, grilled fish, light appetizers",
    WineType.RICH_WHITE: "Lobster, creamy sauces, roast chicken",
    WineType.LIGHT_WHITE: "Shellfish, goat cheese, green salads",
    WineType.SPARKLING: "Oysters, fried snacks, celebration food",
    WineType.DESSERT: "Fruit tarts, blue cheese, dark chocolate",
}


class PairingService:
    """Food pairing lookup. Varietal first, wine_type fallback."""

    def get_pairing(self, varietal: Optional[str], wine_type: Optional[WineType]) -> Optional[str]:
        """Return food pairing string, or None if no match."""
        if varietal:
            result = VARIETAL_PAIRINGS.get(_varietal_key(varietal))
            if result:
                return result

        if wine_type is not None:
            return TYPE_PAIRINGS.get(wine_type)

        return None


def _varietal_key(varietal: str) -> str:
    # Keys are unaccented: "Albariño" looks up "albarino"
    return normalize_region(varietal)
