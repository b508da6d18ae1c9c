import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from tests.main import BOOK_TITLES, Author, Book, app, get_session


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an isolated in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a test database session."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="books")
def books_fixture(session: Session):
    """Seed the book table."""
    books = [Book(title=title) for title in BOOK_TITLES]
    session.add_all(books)
    session.add_all([Author(title="Atwood"), Author(title="Borges")])
    session.commit()
    return books


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client bound to the test session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
