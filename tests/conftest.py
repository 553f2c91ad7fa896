"""
Pytest fixtures: saubere DB-Umgebung und ein gemockter psycopg_pool.ConnectionPool.
Es wird nie eine echte Datenbank kontaktiert.
"""
import pytest

from pgfunction import db
from pgfunction.services.db_config import ENV_NAMES

VALID_ENV = {
    "DB_HOST": "db.local",
    "DB_PORT": "5432",
    "DB_NAME": "app",
    "DB_USER": "svc",
    "DB_PASSWORD": "x",
}

@pytest.fixture(autouse=True)
def fresh_instance(monkeypatch):
    """Every test starts on a cold instance; monkeypatch restores the globals afterwards."""
    monkeypatch.setattr(db, "_state", "uninitialized")
    monkeypatch.setattr(db, "_pool", None)
    monkeypatch.setattr(db, "_error", None)

@pytest.fixture
def clean_env(monkeypatch):
    for names in ENV_NAMES.values():
        for name in names:
            monkeypatch.delenv(name, raising=False)
    return monkeypatch

@pytest.fixture
def db_env(clean_env):
    for name, value in VALID_ENV.items():
        clean_env.setenv(name, value)
    return dict(VALID_ENV)

@pytest.fixture
def pool_cls(mocker):
    """Patches ConnectionPool where pgfunction.db uses it; the instance is pool_cls.return_value."""
    return mocker.patch("pgfunction.db.ConnectionPool")

@pytest.fixture
def probe_conn(pool_cls):
    """The connection the liveness probe borrows from the mocked pool."""
    return pool_cls.return_value.connection.return_value.__enter__.return_value
