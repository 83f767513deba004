"""
Test configuration and fixtures.

Provides:
- A seeded in-memory store and the services bound to it
- The FastAPI app built around that store
- An HTTPX AsyncClient speaking to the app in-process
- A RemoteDataSource whose backend is the same app
"""
import pytest
from httpx import ASGITransport, AsyncClient

from school_admin.core.config import Settings
from school_admin.datasources import InMemoryStore, RemoteDataSource, seed_demo_data
from school_admin.main import create_app
from school_admin.services import Services


# =============================================================================
# Store and services
# =============================================================================

@pytest.fixture
def store() -> InMemoryStore:
    return seed_demo_data(InMemoryStore())


@pytest.fixture
def empty_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def services(store: InMemoryStore) -> Services:
    return Services(store)


@pytest.fixture
def empty_services(empty_store: InMemoryStore) -> Services:
    return Services(empty_store)


# =============================================================================
# HTTP fixtures
# =============================================================================

@pytest.fixture
def app(store: InMemoryStore):
    return create_app(Settings(), source=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def remote(app):
    """RemoteDataSource whose backend is the in-process app."""
    http = AsyncClient(transport=ASGITransport(app=app), base_url="http://test/api")
    source = RemoteDataSource(client=http)
    yield source
    await http.aclose()


@pytest.fixture
def remote_services(remote: RemoteDataSource) -> Services:
    return Services(remote)
