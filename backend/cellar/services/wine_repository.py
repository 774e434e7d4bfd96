"""
Wine catalog repository with SQLite backend.

Provides thread-safe access to the cellar database with:
- Connection pooling per thread
- Type and region lookups
- Bulk operations for seeding
"""

import json
import logging
import sqlite3
from dataclasses import dataclass
from typing import Optional

from ..db import BaseRepository
from ..models.enums import WineType

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, wine_type, region, country, winery, varietal, vintage, rating"

MIN_RATING = 1.0
MAX_RATING = 5.0


def _rating_in_range(rating: Optional[float]) -> bool:
    return rating is None or MIN_RATING <= rating <= MAX_RATING


@dataclass
class WineRecord:
    """A wine record from the database."""
    id: int
    name: str
    wine_type: WineType
    region: str
    country: Optional[str] = None
    winery: Optional[str] = None
    varietal: Optional[str] = None
    vintage: Optional[int] = None
    rating: Optional[float] = None


class WineRepository(BaseRepository):
    """
    Thread-safe SQLite repository for the wine catalog.

    The schema must already exist; run cellar.db.ensure_schema first.
    """

    def __init__(self, db_path: Optional[str] = None):
        super().__init__(db_path, use_wal=True)

    def find_by_type(self, wine_type: WineType) -> list[WineRecord]:
        """Get all wines of a type, best rated first."""
        conn = self._get_connection()
        cursor = conn.cursor()
        cursor.execute(f"""
            SELECT {_COLUMNS}
            FROM wines
            WHERE wine_type = ?
            ORDER BY rating IS NULL, rating DESC, name
        """, (wine_type.value,))
        return [self._row_to_record(row) for row in cursor.fetchall()]

    def find_by_id(self, wine_id: int) -> Optional[WineRecord]:
        """Find wine by ID."""
        conn = self._get_connection()
        cursor = conn.cursor()
        cursor.execute(f"SELECT {_COLUMNS} FROM wines WHERE id = ?", (wine_id,))
        row = cursor.fetchone()
        if row:
            return self._row_to_record(row)
        return None

    def list_regions(self, wine_type: Optional[WineType] = None) -> list[str]:
        """Distinct regions, optionally restricted to one wine type."""
        conn = self._get_connection()
        cursor = conn.cursor()
        if wine_type is None:
            cursor.execute("SELECT DISTINCT region FROM wines")
        else:
            cursor.execute(
                "SELECT DISTINCT region FROM wines WHERE wine_type = ?",
                (wine_type.value,),
            )
        regions = {row['region'] for row in cursor.fetchall()}
        return sorted(regions, key=str.lower)

    def add_wine(
        self,
        name: str,
        wine_type: WineType,
        region: str,
        country: Optional[str] = None,
        winery: Optional[str] = None,
        varietal: Optional[str] = None,
        vintage: Optional[int] = None,
        rating: Optional[float] = None,
    ) -> int:
        """
        Add a wine to the database.

        Returns the wine ID. Raises ValueError for a rating outside 1-5 and
        sqlite3.IntegrityError on a duplicate (name, vintage).
        """
        if not _rating_in_range(rating):
            raise ValueError(f"rating must be between 1 and 5, got {rating}")

        with self._transaction() as cursor:
            cursor.execute("""
                INSERT INTO wines (name, wine_type, region, country, winery, varietal, vintage, rating)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """, (name, wine_type.value, region, country, winery, varietal, vintage, rating))
            return cursor.lastrowid

    def count(self) -> int:
        """Get total wine count."""
        conn = self._get_connection()
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM wines")
        return cursor.fetchone()[0]

    def bulk_insert(self, wines: list[dict], batch_size: int = 500) -> tuple[int, int]:
        """
        Bulk insert wines.

        Args:
            wines: List of wine dicts with name, wine_type, region and
                   optional country, winery, varietal, vintage, rating.
            batch_size: Number of records per commit

        Malformed entries (missing name or region, unknown wine_type,
        rating outside 1-5) are logged and counted as skipped.

        Returns:
            Tuple of (inserted_count, skipped_count)
        """
        inserted = 0
        skipped = 0

        conn = self._get_connection()
        cursor = conn.cursor()

        for i, wine in enumerate(wines):
            problem = self._entry_problem(wine)
            if problem:
                logger.warning(f"Skipping {wine.get('name')!r}: {problem}")
                skipped += 1
                continue

            try:
                cursor.execute("""
                    INSERT INTO wines (name, wine_type, region, country, winery, varietal, vintage, rating)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    wine['name'].strip(),
                    WineType(wine['wine_type']).value,
                    wine['region'].strip(),
                    wine.get('country'),
                    wine.get('winery'),
                    wine.get('varietal'),
                    wine.get('vintage'),
                    wine.get('rating'),
                ))
                inserted += 1
            except sqlite3.IntegrityError:
                skipped += 1

            if (i + 1) % batch_size == 0:
                conn.commit()

        conn.commit()
        return inserted, skipped

    def seed_from_json(self, json_path: str) -> tuple[int, int]:
        """
        Load a JSON catalog ({"wines": [...]}) into the database.

        Returns:
            Tuple of (inserted_count, skipped_count)
        """
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return self.bulk_insert(data.get("wines", []))

    @staticmethod
    def _entry_problem(wine: dict) -> Optional[str]:
        """Reason a catalog entry cannot be stored, or None if it is valid."""
        for key in ('name', 'region'):
            value = wine.get(key)
            if not isinstance(value, str) or not value.strip():
                return f"missing {key}"

        try:
            WineType(wine.get('wine_type'))
        except ValueError:
            return f"unknown wine_type {wine.get('wine_type')!r}"

        rating = wine.get('rating')
        if rating is not None:
            if isinstance(rating, bool) or not isinstance(rating, (int, float)):
                return f"rating {rating!r} is not a number"
            if not _rating_in_range(rating):
                return f"rating {rating} outside 1-5"
        return None

    def _row_to_record(self, row: sqlite3.Row) -> WineRecord:
        """Convert database row to WineRecord."""
        return WineRecord(
            id=row['id'],
            name=row['name'],
            wine_type=WineType(row['wine_type']),
            region=row['region'],
            country=row['country'],
            winery=row['winery'],
            varietal=row['varietal'],
            vintage=row['vintage'],
            rating=row['rating'],
        )
