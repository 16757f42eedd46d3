import pytest
from faker import Faker
from sqlalchemy import select

from blogdb import schema
from blogdb.database import get_connection, make_engine


def _pk(table):
    return list(table.primary_key.columns)[0]


@pytest.fixture
def engine(tmp_path):
    # File-backed so every connection is a separate SQLite session.
    engine = make_engine(f"sqlite:///{tmp_path / 'blog.db'}", echo=False)
    schema.create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def conn(engine):
    with engine.connect() as conn:
        yield conn


@pytest.fixture
def fake():
    fake = Faker()
    fake.seed_instance(1234)
    return fake


@pytest.fixture
def fetch_ids(engine):
    """Return the set of committed primary keys of a table, read on a fresh connection."""
    def _fetch_ids(table):
        with get_connection(engine) as other:
            return set(other.execute(select(_pk(table))).scalars())
    return _fetch_ids


@pytest.fixture
def fetch_row(engine):
    """Look a committed row up by primary key on a fresh connection."""
    def _fetch_row(table, row_id):
        with get_connection(engine) as other:
            return other.execute(select(table).where(_pk(table) == row_id)).mappings().first()
    return _fetch_row
