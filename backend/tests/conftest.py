"""
Pytest configuration for the wine cellar tests.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from cellar.db import ensure_schema
from cellar.services.wine_repository import WineRepository


DATA_DIR = Path(__file__).parent.parent / "cellar" / "data"
CATALOG_PATH = DATA_DIR / "cellar.json"


def pytest_configure(config):
    """Mark the app ready for tests.

    TestClient doesn't trigger lifespan events unless used as a context
    manager, so the warmup middleware would otherwise return 503.
    """
    from main import set_ready
    set_ready(True)


@pytest.fixture
def db_path(tmp_path):
    """Create a fresh DB with schema applied."""
    path = str(tmp_path / "cellar.db")
    ensure_schema(path)
    return path


@pytest.fixture
def repo(db_path):
    """Empty repository on a migrated temp database."""
    repository = WineRepository(db_path=db_path)
    yield repository
    repository.close()


@pytest.fixture
def seeded_repo(repo):
    """Repository loaded with the bundled catalog."""
    repo.seed_from_json(str(CATALOG_PATH))
    return repo


@pytest.fixture
def client(seeded_repo, monkeypatch):
    """Test client whose /wine routes read from the seeded temp database."""
    from cellar.routes import wine as wine_module
    from main import app

    monkeypatch.setattr(wine_module, "_get_repository", lambda: seeded_repo)

    yield TestClient(app)

    app.dependency_overrides.clear()
