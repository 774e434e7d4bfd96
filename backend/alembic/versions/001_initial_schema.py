"""Initial schema - wines table for the cellar catalog.

Revision ID: 001
Revises: None
Create Date: 2026-10-19

Creates the wines table and the indexes used by type/region lookups.
"""
from typing import Sequence, Union

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Schema SQL inlined so this migration always creates the same schema.
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS wines (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    wine_type TEXT NOT NULL,
    region TEXT NOT NULL,
    country TEXT,
    winery TEXT,
    varietal TEXT,
    vintage INTEGER,
    rating REAL CHECK (rating IS NULL OR rating BETWEEN 1 AND 5),
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- One row per (name, vintage); non-vintage wines share vintage 0
CREATE UNIQUE INDEX IF NOT EXISTS idx_wines_name_vintage
    ON wines(LOWER(name), COALESCE(vintage, 0));

CREATE INDEX IF NOT EXISTS idx_wines_wine_type ON wines(wine_type);
CREATE INDEX IF NOT EXISTS idx_wines_region ON wines(LOWER(region));
CREATE INDEX IF NOT EXISTS idx_wines_country ON wines(LOWER(country));
"""


def upgrade() -> None:
    # Use raw DBAPI connection for multi-statement SQL
    conn = op.get_bind()
    raw_conn = conn.connection.dbapi_connection
    raw_conn.executescript(SCHEMA_SQL)


def downgrade() -> None:
    conn = op.get_bind()
    raw_conn = conn.connection.dbapi_connection

    for index in (
        "idx_wines_country",
        "idx_wines_region",
        "idx_wines_wine_type",
        "idx_wines_name_vintage",
    ):
        raw_conn.execute(f"DROP INDEX IF EXISTS {index}")
    raw_conn.execute("DROP TABLE IF EXISTS wines")
