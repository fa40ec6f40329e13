"""
Centralized Test Configuration.
"""

import random

import pytest

from parcel_tracker.app.core.config import Settings
from parcel_tracker.app.db.session import create_engine_from_settings, create_session_factory, init_models
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import Parcel
from parcel_tracker.app.services.parcel_store import ParcelStore

FIXED_CREATED_AT = "2024-01-15T10:30:00Z"


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a fresh SQLite file (pooled, one connection per session)."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'parcel.db'}",
    )


@pytest.fixture
async def engine(test_settings):
    """Engine with the parcel table created, one database per test."""
    test_engine = create_engine_from_settings(test_settings)
    await init_models(test_engine)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def store(session_factory):
    return ParcelStore(session_factory)


@pytest.fixture
def rng():
    """Locally seeded generator; tests never touch the global random state."""
    return random.Random(20240115)


@pytest.fixture
def make_parcel():
    """Factory for the standard test parcel."""
    def _make_parcel(**overrides) -> Parcel:
        data = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "test",
            "created_at": FIXED_CREATED_AT,
        }
        data.update(overrides)
        return Parcel(**data)

    return _make_parcel
