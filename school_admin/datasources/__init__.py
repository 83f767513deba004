# school_admin/datasources/__init__.py
from typing import Optional

from ..core.config import Settings, settings as default_settings
from .base import DataSource
from .memory import InMemoryStore
from .remote import RemoteDataSource
from .seed import seed_demo_data


def build_data_source(settings: Optional[Settings] = None) -> DataSource:
    """Data source selected by configuration."""
    settings = settings or default_settings
    if settings.data_source == 'remote':
        return RemoteDataSource(base_url=settings.remote_base_url, timeout=settings.request_timeout)

    store = InMemoryStore(latency=settings.mock_latency_ms / 1000)
    if settings.seed_demo_data:
        seed_demo_data(store)
    return store


__all__ = ["DataSource", "InMemoryStore", "RemoteDataSource", "build_data_source", "seed_demo_data"]
