#!/usr/bin/env python3
"""
Seed the cellar database from a JSON catalog.

Usage:
    python scripts/seed_cellar.py
    python scripts/seed_cellar.py --catalog my_wines.json --db /tmp/cellar.db --reset

Runs Alembic migrations first, so it also works on a fresh database.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add backend to path
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

from cellar.config import Config
from cellar.db import ensure_schema
from cellar.services.wine_repository import WineRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - seed - %(levelname)s - %(message)s",
)
logger = logging.getLogger("seed")


def seed(db_path: str, catalog_path: str, reset: bool = False) -> tuple[int, int]:
    """Migrate and seed the database. Returns (inserted, skipped)."""
    ensure_schema(db_path)
    repo = WineRepository(db_path=db_path)
    try:
        if reset:
            with repo._transaction() as cursor:
                cursor.execute("DELETE FROM wines")
            logger.info("Cleared existing wines")

        inserted, skipped = repo.seed_from_json(catalog_path)
        logger.info(f"Inserted {inserted} wines, skipped {skipped} (total {repo.count()})")
        return inserted, skipped
    finally:
        repo.close()


def main():
    parser = argparse.ArgumentParser(description="Seed the wine cellar database")
    parser.add_argument("--db", default=Config.database_path(), help="SQLite database path")
    parser.add_argument("--catalog", default=Config.seed_path(), help="JSON catalog path")
    parser.add_argument("--reset", action="store_true", help="Delete existing wines first")
    args = parser.parse_args()

    if not Path(args.catalog).exists():
        logger.error(f"Catalog not found: {args.catalog}")
        sys.exit(1)

    seed(args.db, args.catalog, reset=args.reset)


if __name__ == "__main__":
    main()
