import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from helpers import NOW, seed_scenario_rules
from travel_discount.app.database import get_db
from travel_discount.app.main import app as fastapi_app
from travel_discount.app.models.generated import Base
from travel_discount.app.services.discounts import SqlDiscountRepository


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def engine():
    """In-memory SQLite DB for fast testing."""
    _engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(_engine)
    yield _engine
    Base.metadata.drop_all(_engine)


@pytest.fixture
def db_session(engine):
    TestSession = sessionmaker(bind=engine)
    s = TestSession()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def seeded(db_session, now):
    """Session with the scenario conditions (3, 22, 26) and coupons (1, 2)."""
    seed_scenario_rules(db_session, now)
    return db_session


@pytest.fixture
def repository(seeded):
    return SqlDiscountRepository(seeded)


@pytest.fixture
def client(engine):
    """TestClient bound to the in-memory DB. Coupon windows use the real clock."""
    TestSession = sessionmaker(bind=engine)

    def override_get_db():
        s = TestSession()
        try:
            yield s
        finally:
            s.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()
