"""
Centralized configuration for the Wine Cellar backend.

All constants are defined here to avoid scattered magic numbers
and enable easy configuration management.
"""

import os
from pathlib import Path


class Config:
    """Application configuration constants."""

    # === Region Matching ===
    REGION_FUZZY_THRESHOLD = 0.85   # Accept fuzzy region match at or above this
    MIN_REGION_QUERY_LENGTH = 4     # Shorter queries never fuzzy-match
    WEIGHT_RATIO = 0.6
    WEIGHT_TOKEN_SORT = 0.4

    # === Query Limits ===
    MAX_LIMIT = 50
    MIN_LIMIT = 1

    # === Environment ===
    @staticmethod
    def log_level() -> str:
        """Log level (DEBUG, INFO, WARNING, ERROR)."""
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def default_limit() -> int:
        """Default number of wines returned by /wine."""
        try:
            value = int(os.getenv("DEFAULT_LIMIT", "20"))
        except ValueError:
            return 20
        return max(Config.MIN_LIMIT, min(Config.MAX_LIMIT, value))

    # === Database Persistence ===
    @staticmethod
    def database_path() -> str:
        """Path to SQLite database file.
        Default: backend/cellar/data/cellar.db (relative to cellar package).
        Override with DATABASE_PATH env var for container deployments.
        """
        default = str(Path(__file__).parent / "data" / "cellar.db")
        return os.getenv("DATABASE_PATH", default)

    @staticmethod
    def seed_path() -> str:
        """Path to the JSON catalog used to seed an empty database."""
        default = str(Path(__file__).parent / "data" / "cellar.json")
        return os.getenv("SEED_PATH", default)

    @staticmethod
    def seed_on_startup() -> bool:
        """Seed an empty database from the JSON catalog at startup. Default: True."""
        return os.getenv("SEED_ON_STARTUP", "true").lower() == "true"
