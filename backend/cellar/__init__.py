"""Wine Cellar: wine recommendations filtered by wine type and region."""

__version__ = "0.1.0"
