import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.main import app
from app.models import string_analysis  # noqa: F401  registers the table
from app.services.catalog import CatalogService
from app.storage import JsonFileStore, SqlStringStore, get_store


# ============================================================
# STORES
# ============================================================

@pytest.fixture
def db_session():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def sql_store(db_session):
    return SqlStringStore(db_session)


@pytest.fixture
def json_store(tmp_path):
    return JsonFileStore(str(tmp_path / "data" / "strings.json"))


@pytest.fixture(params=["sql", "json"])
def store(request):
    """Every store implementation, so behaviour is checked against both."""
    if request.param == "sql":
        return request.getfixturevalue("sql_store")
    return request.getfixturevalue("json_store")


@pytest.fixture
def catalog(store):
    return CatalogService(store)


# ============================================================
# HTTP
# ============================================================

@pytest.fixture
def client(sql_store):
    app.dependency_overrides[get_store] = lambda: sql_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
