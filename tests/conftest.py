"""
Test configuration and fixtures for the edge data layer.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from shortlink_app.database.connection import Base, EdgeDatabase
from shortlink_app.dependencies import get_edge_database
from shortlink_app.models import Affiliate, Domain, Link, Project, Token, User
from shortlink_app.services.edge_service import EdgeService
from shortlink_app.services.key_factory import KeyFactory

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_edge.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Create session
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        # Cleanup
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def seeded(db_session):
    """
    One workspace with a domain, a handful of links, a user with an API
    token and an affiliate.
    """
    db_session.add_all([
        User(id="user_1", name="Ada Lovelace", email="ada@example.com"),
        Project(id="abc123", name="Acme", slug="acme", plan="pro", ai_usage=4, ai_limit=100),
    ])
    db_session.flush()
    db_session.add_all([
        Token(id="tok_1", name="CI", hashed_key="hashed-secret", user_id="user_1"),
        Affiliate(
            id="aff_1", username="ada", email="ada@example.com",
            project_id="abc123", user_id="user_1",
        ),
        Domain(id="dom_1", slug="acme.link", target="https://example.com", project_id="abc123"),
        Domain(id="dom_2", slug="bare.link", target=None, project_id="abc123"),
        Link(
            id="link_1", domain="acme.link", link_key="docs", url="https://docs.example.com",
            title="Docs", proxy=True, project_id="abc123",
            geo={"US": "https://us.example.com"},
        ),
        Link(
            id="link_2", domain="acme.link", link_key="xn--caf-dma", url="https://cafe.example.com",
            project_id="abc123",
        ),
        Link(
            id="link_3", domain="other.link", link_key="docs", url="https://other.example.com",
            public_stats=True,
        ),
    ])
    db_session.commit()
    return db_session


@pytest.fixture(scope="function")
def edge_db(db_session):
    """Database handle bound to the test engine"""
    return EdgeDatabase(engine=engine)


@pytest.fixture(scope="function")
def service(edge_db):
    return EdgeService(db=edge_db)


@pytest.fixture(scope="function")
def disabled_service():
    """Service with no database configured"""
    return EdgeService(db=EdgeDatabase(url=None))


@pytest.fixture(autouse=True)
def reset_key_factory():
    KeyFactory.clear_instances()
    yield
    KeyFactory.clear_instances()


@pytest.fixture(scope="function")
def client(edge_db):
    """
    Create a test client with the database dependency overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_edge_database] = lambda: edge_db

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
