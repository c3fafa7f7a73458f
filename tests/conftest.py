"""Pytest configuration and fixtures."""

import itertools
import os

# Running in Docker - use PostgreSQL test database; locally - use SQLite
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/growstuff", "/growstuff_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
    os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src import models  # noqa: F401
from src.api.dependencies import get_geocoding_service
from src.database import Base, get_db
from src.main import app
from src.services.geocoding import Coordinates, GeocodingError
from src.services.member_service import MemberService

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_PASSWORD = "password123"


class AuthHeaders(dict):
    """Dict subclass that also stores the member's id and login name."""

    def __init__(self, *args, member_id: int | None = None, login_name: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.member_id = member_id
        self.login_name = login_name


class FakeGeocoder:
    """In-memory stand-in for the Nominatim geocoder."""

    KNOWN_LOCATIONS = {
        "Greenwich, UK": Coordinates(latitude=51.4779, longitude=-0.0015),
        "Melbourne, Australia": Coordinates(latitude=-37.8142, longitude=144.9632),
        "Portland, Oregon": Coordinates(latitude=45.5202, longitude=-122.6742),
    }

    def __init__(self):
        self.calls: list[str] = []
        self.failing: set[str] = set()

    async def geocode(self, query: str) -> Coordinates | None:
        self.calls.append(query)
        if query in self.failing:
            raise GeocodingError(f"provider unavailable for {query}")
        return self.KNOWN_LOCATIONS.get(query)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def member_service(db, geocoder):
    return MemberService(db, geocoder)


@pytest.fixture
def create_member(member_service):
    """Factory for confirmed members named member1, member2, ..."""
    counter = itertools.count(1)

    async def _create(**overrides):
        n = next(counter)
        data = {
            "login_name": f"member{n}",
            "email": f"member{n}@example.com",
            "password": DEFAULT_PASSWORD,
            "tos_agreement": True,
            "confirmed": True,
        }
        data.update(overrides)
        return await member_service.signup(**data)

    return _create


@pytest.fixture(scope="function")
def client(db, geocoder):
    """Create a test client with database and geocoder overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_geocoding_service] = lambda: geocoder
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup_headers(client, login_name: str) -> AuthHeaders:
    response = client.post(
        "/api/v1/auth/signup",
        json={
            "login_name": login_name,
            "email": f"{login_name.lower()}@example.com",
            "password": DEFAULT_PASSWORD,
            "tos_agreement": True,
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"},
        member_id=data["member"]["id"],
        login_name=data["member"]["login_name"],
    )


@pytest.fixture
def auth_headers(client):
    """Sign up a member and return auth headers with member info."""
    return signup_headers(client, "Test_Gardener")


@pytest.fixture
def admin_headers(client, db):
    """Sign up a member holding the admin role."""
    headers = signup_headers(client, "head_gardener")
    service = MemberService(db, FakeGeocoder())
    service.assign_role(service.get_by_login_name("head_gardener"), "admin")
    return headers
