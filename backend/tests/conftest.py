"""
Pytest Configuration and Fixtures

Provides an isolated SQLite database per test and common fixtures.
"""
import os

# Keep the application engine away from a real database file.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from universe_manager.database import Base, create_db_engine

# Use SQLite in-memory for testing
SQLALCHEMY_DATABASE_URL = "sqlite://"


class FakeClock:
    """Deterministic clock for ledger timestamps"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture(scope="function")
def test_engine():
    """Fresh in-memory database with the full schema for each test."""
    from universe_manager import models  # noqa: F401  (registers tables)

    engine = create_db_engine(SQLALCHEMY_DATABASE_URL, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine):
    """Create a database session for each test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestingSessionLocal()

    yield session

    session.close()


@pytest.fixture
def clock():
    """Clock frozen at a known instant; call clock.advance(days=...) to move it."""
    return FakeClock(datetime(2025, 8, 8, 20, 0, 0))


@pytest.fixture
def commands(db_session, clock):
    """Command facade wired to the test session and fake clock."""
    from universe_manager.services.commands import UniverseCommands

    return UniverseCommands(db_session, clock=clock)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    from universe_manager.database import get_db
    from universe_manager.main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    # Override the lifespan to skip DB initialization
    original_lifespan = app.router.lifespan_context

    @asynccontextmanager
    async def test_lifespan(app):
        yield

    app.router.lifespan_context = test_lifespan
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    app.router.lifespan_context = original_lifespan


def _add(db_session, obj):
    db_session.add(obj)
    db_session.commit()
    db_session.refresh(obj)
    return obj


@pytest.fixture
def raw_show(db_session):
    """Create the RAW show."""
    from universe_manager.models import Show

    return _add(db_session, Show(name="Monday Night RAW", description="Red brand"))


@pytest.fixture
def smackdown_show(db_session):
    """Create the SmackDown show."""
    from universe_manager.models import Show

    return _add(db_session, Show(name="Friday Night SmackDown", description="Blue brand"))


@pytest.fixture
def male_wrestler(db_session):
    """Create a male wrestler."""
    from universe_manager.models import Gender, Wrestler

    return _add(db_session, Wrestler(name="Cody Rhodes", gender=Gender.MALE, wins=45, losses=12))


@pytest.fixture
def second_male_wrestler(db_session):
    """Create another male wrestler."""
    from universe_manager.models import Gender, Wrestler

    return _add(db_session, Wrestler(name="Seth Rollins", gender=Gender.MALE, wins=40, losses=15))


@pytest.fixture
def female_wrestler(db_session):
    """Create a female wrestler."""
    from universe_manager.models import Gender, Wrestler

    return _add(db_session, Wrestler(name="Rhea Ripley", gender=Gender.FEMALE, wins=38, losses=9))


@pytest.fixture
def world_title(db_session):
    """Create a vacant men's world title."""
    from universe_manager.models import Title, TitleGender, TitleType

    return _add(
        db_session,
        Title(
            name="World Championship",
            title_type=TitleType.SINGLES,
            division="World",
            prestige_tier=1,
            gender=TitleGender.MALE,
            is_active=True,
        ),
    )


@pytest.fixture
def mixed_title(db_session):
    """Create a vacant cross-brand mixed title."""
    from universe_manager.models import Title, TitleGender, TitleType

    return _add(
        db_session,
        Title(
            name="Hardcore Championship",
            title_type=TitleType.SINGLES,
            division="Hardcore",
            prestige_tier=4,
            gender=TitleGender.MIXED,
            is_active=True,
        ),
    )


@pytest.fixture
def womens_title(db_session, raw_show):
    """Create a vacant women's title owned by RAW."""
    from universe_manager.models import Title, TitleGender, TitleType

    return _add(
        db_session,
        Title(
            name="Women's World Championship",
            title_type=TitleType.SINGLES,
            division="Women's World",
            prestige_tier=1,
            gender=TitleGender.FEMALE,
            show_id=raw_show.id,
            is_active=True,
        ),
    )
