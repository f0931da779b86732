import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from main import app
from todo_scheduler.core.database import get_session

from tests.utils import signup


@pytest.fixture(name="session")
def session_fixture():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client_factory")
def client_factory_fixture(session: Session):
    """Build TestClients that share the overridden session.

    Each client keeps its own cookie jar, so one client per user.
    """
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    yield lambda **kwargs: TestClient(app, **kwargs)
    app.dependency_overrides.clear()


@pytest.fixture(name="client")
def client_fixture(client_factory) -> TestClient:
    return client_factory()


@pytest.fixture(name="alice")
def alice_fixture(client_factory) -> TestClient:
    client = client_factory()
    signup(client, "alice")
    return client


@pytest.fixture(name="bob")
def bob_fixture(client_factory) -> TestClient:
    client = client_factory()
    signup(client, "bob")
    return client
