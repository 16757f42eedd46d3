import pytest
from sqlalchemy import text

from blogdb import database


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "SQL_ECHO"):
        monkeypatch.delenv(name, raising=False)


def test_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", " sqlite:///blog.db ")

    assert database.database_url() == "sqlite:///blog.db"


def test_database_url_fallback():
    assert database.database_url() == database.FALLBACK_DATABASE_URL


def test_database_url_ignores_pooling_variables(monkeypatch):
    monkeypatch.setenv("USE_CONNECTION_POOLING", "1")
    monkeypatch.setenv("DATABASE_URL_POOLED", "postgresql+psycopg://u@pgbouncer:6432/blog")

    assert database.database_url() == database.FALLBACK_DATABASE_URL


def test_database_url_uses_psycopg_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/blog")

    assert database.database_url() == "postgresql+psycopg://u:p@db:5432/blog"


def test_database_url_rejects_blank(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "   ")

    with pytest.raises(RuntimeError):
        database.database_url()


def test_make_engine_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("SQL_ECHO", "1")

    engine = database.make_engine()

    assert engine.dialect.name == "sqlite"
    assert engine.echo is True
    engine.dispose()


def test_sqlite_engine_enforces_foreign_keys():
    engine = database.make_engine("sqlite://")

    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
    engine.dispose()


def test_get_connection_closes_connection():
    engine = database.make_engine("sqlite://")

    with database.get_connection(engine) as conn:
        assert conn.execute(text("SELECT 1")).scalar() == 1

    assert conn.closed
    engine.dispose()


def test_get_connection_closes_on_error():
    engine = database.make_engine("sqlite://")

    with pytest.raises(ZeroDivisionError):
        with database.get_connection(engine) as conn:
            1 / 0

    assert conn.closed
    engine.dispose()
