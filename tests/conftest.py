"""
Pytest configuration and fixtures for the translation service.

The environment is pointed at an in-memory SQLite database before the
application is imported so the engine is built against it.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "local"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["CACHE_KEY_PREFIX"] = "test"
os.environ.pop("REDIS_URL", None)
os.environ.pop("EXPORT_REQUIRES_AUTH", None)

from collections.abc import Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from translation_service.api.deps import get_cache_store  # noqa: E402
from translation_service.auth import UserCreate, create_user  # noqa: E402
from translation_service.core.cache import (  # noqa: E402
    CacheService,
    InMemoryCacheStore,
)
from translation_service.core.db import engine, get_db  # noqa: E402
from translation_service.exports import (  # noqa: E402
    CacheInvalidator,
    ExportService,
    FreshnessResolver,
)
from translation_service.main import app  # noqa: E402
from tests.factories import CACHE_PREFIX, TEST_PASSWORD, fake, get_token  # noqa: E402


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """A fresh schema per test."""
    SQLModel.metadata.create_all(engine)
    with Session(engine) as db_session:
        yield db_session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def cache_store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def cache(cache_store) -> CacheService:
    return CacheService(cache_store, prefix=CACHE_PREFIX)


@pytest.fixture
def freshness(session, cache) -> FreshnessResolver:
    return FreshnessResolver(session, cache)


@pytest.fixture
def export_service(session, cache, freshness) -> ExportService:
    return ExportService(session, cache, freshness)


@pytest.fixture
def invalidator(cache) -> CacheInvalidator:
    return CacheInvalidator(cache)


@pytest.fixture
def client(session, cache_store) -> Generator[TestClient, None, None]:
    """Test client sharing the test's session and cache store."""

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache_store] = lambda: cache_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def superuser(session):
    user = create_user(
        session=session,
        user_create=UserCreate(
            email=fake.unique.email(),
            password=TEST_PASSWORD,
            full_name=fake.name(),
            is_superuser=True,
        ),
    )
    return {"id": user.id, "email": user.email, "password": TEST_PASSWORD}


@pytest.fixture
def auth_headers(client, superuser) -> dict[str, str]:
    token = get_token(client, superuser["email"], superuser["password"])
    return {"Authorization": f"Bearer {token}"}
