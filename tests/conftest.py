"""Shared fixtures: a temporary SQLite database wired through the app's session module."""

import os

os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")

import pytest

import database.session as db_session
from config import settings


@pytest.fixture
async def db(tmp_path, monkeypatch):
    """Fresh database file per test; yields the session factory."""
    monkeypatch.setattr(settings, "DATABASE_PATH", tmp_path / "test.db")
    monkeypatch.setattr(settings, "DATABASE_URL", None)
    await db_session.close_engine()
    await db_session.create_tables()
    yield db_session.get_session
    await db_session.close_engine()


@pytest.fixture
def seed(db):
    """Insert ORM rows in their own committed session."""

    async def _seed(*rows):
        async with db() as session:
            session.add_all(list(rows))
        return rows

    return _seed
