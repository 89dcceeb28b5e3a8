"""
pytest Fixtures for BookStore API Tests

Shared fixtures used across all test files.

For database tests:
- session scope for the engine (created once)
- function scope for sessions (each test runs inside a transaction
  that is rolled back afterwards)

Authentication:
- auth_headers(*roles) builds an Authorization header whose token
  carries the given roles; admin_headers and customer_headers are the
  two common cases.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "bookstore-unit-tests-signing-key-0123456789abcdef"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from collections.abc import Callable, Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.database import Base, get_db
from bookstore.main import app
from bookstore.models import Author, Book, Role, User, UserRole
from bookstore.services.security import create_access_token, hash_password

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps the suite fast and self-contained. The app
# itself defaults to PostgreSQL.

@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps one connection alive for the whole session;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session joins an outer transaction that is rolled back at the
    end, so commits made by repositories never leak between tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client bound to the test database.

    get_db is overridden so every request uses db_session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def server_error_client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Like client, but unhandled exceptions come back as responses.

    Lets tests observe what the catch-all 500 handler sends to callers.
    """
    app.dependency_overrides[get_db] = lambda: db_session

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# AUTHENTICATION FIXTURES
# =============================================================================
@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """
    Factory for Authorization headers.

    Usage:
        headers = auth_headers(Role.CUSTOMER)
    """

    def build(*roles: Role, user_id: int = 1) -> dict[str, str]:
        token = create_access_token(
            {
                "sub": str(user_id),
                "email": "tester@bookstore.com",
                "roles": [role.value for role in roles],
            }
        )
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture
def admin_headers(auth_headers) -> dict[str, str]:
    return auth_headers(Role.ADMINISTRATOR, Role.CUSTOMER)


@pytest.fixture
def customer_headers(auth_headers) -> dict[str, str]:
    return auth_headers(Role.CUSTOMER)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        first_name="George",
        last_name="Orwell",
        bio="English novelist and essayist, journalist and critic.",
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """
    Create a sample book written by sample_author.

    pytest resolves the sample_author dependency automatically.
    """
    book = Book(
        title="1984",
        year=1949,
        isbn="9780451524935",
        summary="A dystopian novel set in a totalitarian society.",
        image="1984.png",
        price=Decimal("12.99"),
        author_id=sample_author.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a Customer account with password "Secret12"."""
    user = User(
        email="reader@bookstore.com",
        hashed_password=hash_password("Secret12"),
        roles=[UserRole(role=Role.CUSTOMER.value)],
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session: Session) -> User:
    """Create an account holding both roles, password "Admin123"."""
    user = User(
        email="admin@bookstore.com",
        hashed_password=hash_password("Admin123"),
        roles=[
            UserRole(role=Role.ADMINISTRATOR.value),
            UserRole(role=Role.CUSTOMER.value),
        ],
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
